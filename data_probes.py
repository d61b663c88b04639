import csv
import os
import statistics
import webbrowser
from datetime import datetime

import matplotlib
import matplotlib.pyplot as plt

from data_generation import SPLITS, group_count, tokenize_words
from number_words import SHORT_SCALE


matplotlib.use("Agg")

UNITS_GROUP_LABEL = "units"
BAR_COLOR = "#3b82f6"


def _load_rows(csv_path):
    values = []
    phrases = []
    with open(csv_path, newline="", encoding="utf-8") as handle:
        reader = csv.reader(handle)
        for row in reader:
            if not row:
                continue
            value_str, words = row
            values.append(int(value_str))
            phrases.append(words)
    return values, phrases


def _leading_scale(value):
    return SHORT_SCALE[group_count(value) - 1] or UNITS_GROUP_LABEL


def _scale_distribution(values):
    counts = {scale or UNITS_GROUP_LABEL: 0 for scale in SHORT_SCALE}
    for value in values:
        counts[_leading_scale(value)] += 1
    return list(counts.keys()), list(counts.values())


def _token_count_distribution(phrases):
    counts = {}
    for words in phrases:
        length = len(tokenize_words(words))
        counts[length] = counts.get(length, 0) + 1
    items = sorted(counts.items())
    x_labels = [str(item[0]) for item in items]
    y_values = [item[1] for item in items]
    return x_labels, y_values


def _stats(values, phrases):
    word_counts = [len(words.split(" ")) for words in phrases]
    char_lengths = [len(words) for words in phrases]
    groups = [group_count(value) for value in values]
    return {
        "count": len(values),
        "min": min(values) if values else 0,
        "max": max(values) if values else 0,
        "words_mean": statistics.mean(word_counts) if word_counts else 0,
        "length_mean": statistics.mean(char_lengths) if char_lengths else 0,
        "length_max": max(char_lengths) if char_lengths else 0,
        "groups_mean": statistics.mean(groups) if groups else 0,
    }


def _save_bar_chart(title, x_labels, y_values, output_path):
    fig_width = max(8, len(x_labels) * 0.35)
    fig, ax = plt.subplots(figsize=(fig_width, 4))
    ax.bar(range(len(y_values)), y_values, color=BAR_COLOR)
    ax.set_title(title)
    ax.set_ylabel("count")
    ax.set_xticks(range(len(x_labels)))
    ax.set_xticklabels(x_labels, rotation=45, ha="right", fontsize=8)
    ax.grid(axis="y", linestyle="--", alpha=0.4)
    fig.tight_layout()
    fig.savefig(output_path)
    plt.close(fig)


def _render_html(sections):
    html_parts = [
        "<!doctype html>",
        "<html>",
        "<head>",
        "<meta charset='utf-8'/>",
        "<title>Spelled Number Probes</title>",
        "<style>",
        "body { font-family: Arial, sans-serif; margin: 24px; color: #111827; }",
        "h1 { margin-bottom: 8px; }",
        ".section { margin: 32px 0; padding-bottom: 24px; border-bottom: 1px solid #e5e7eb; }",
        ".stats { font-size: 14px; margin: 8px 0 16px; }",
        ".charts { display: grid; gap: 16px; }",
        ".charts img { max-width: 100%; height: auto; border: 1px solid #e5e7eb; }",
        "</style>",
        "</head>",
        "<body>",
        "<h1>Spelled Number Probes</h1>",
        "<p>Scale coverage and phrase lengths of the generated splits.</p>",
    ]
    for section in sections:
        stats = section["stats"]
        html_parts.append("<div class='section'>")
        html_parts.append(f"<h2>{section['split']}</h2>")
        html_parts.append(
            "<div class='stats'>"
            f"count: {stats['count']}, min: {stats['min']}, max: {stats['max']}, "
            f"groups mean: {stats['groups_mean']:.2f}, "
            f"words mean: {stats['words_mean']:.2f}, "
            f"length mean: {stats['length_mean']:.2f}, "
            f"length max: {stats['length_max']}"
            "</div>"
        )
        html_parts.append("<div class='charts'>")
        html_parts.append(f"<img src='{section['scale_chart']}' alt='leading scales' />")
        html_parts.append(
            f"<img src='{section['token_chart']}' alt='token counts' />"
        )
        html_parts.append("</div>")
        html_parts.append("</div>")
    html_parts.extend(["</body>", "</html>"])
    return "\n".join(html_parts)


def run_data_probes(data_dir="data", output_path=None, open_browser=True):
    timestamp = datetime.now().strftime("%Y%m%d-%H%M%S")
    base_dir = os.path.join(data_dir, "probes")
    if output_path is None:
        output_path = os.path.join(base_dir, f"probes-{timestamp}.html")
    report_dir = os.path.dirname(output_path) or "."
    assets_dir = os.path.join(report_dir, f"probes-{timestamp}-assets")
    os.makedirs(assets_dir, exist_ok=True)

    sections = []
    for split in SPLITS:
        csv_path = os.path.join(data_dir, f"words-{split}.csv")
        if not os.path.isfile(csv_path):
            print(f"ERROR: Missing split file: {csv_path}")
            continue
        values, phrases = _load_rows(csv_path)
        scale_labels, scale_counts = _scale_distribution(values)
        token_labels, token_counts = _token_count_distribution(phrases)
        scale_chart_path = os.path.join(assets_dir, f"{split}-scales.png")
        token_chart_path = os.path.join(assets_dir, f"{split}-tokens.png")
        _save_bar_chart(
            f"{split}: leading scale word",
            scale_labels,
            scale_counts,
            scale_chart_path,
        )
        _save_bar_chart(
            f"{split}: tokens per phrase",
            token_labels,
            token_counts,
            token_chart_path,
        )
        sections.append(
            {
                "split": split,
                "stats": _stats(values, phrases),
                "scale_chart": os.path.relpath(scale_chart_path, report_dir),
                "token_chart": os.path.relpath(token_chart_path, report_dir),
            }
        )

    with open(output_path, "w", encoding="utf-8") as handle:
        handle.write(_render_html(sections))

    if open_browser:
        abs_path = os.path.abspath(output_path)
        webbrowser.open(f"file://{abs_path}")

    return output_path


if __name__ == "__main__":
    run_data_probes()
