import csv
import os
import random

import torch
from torch.utils.data import Dataset

from number_words import (
    HUNDRED,
    MAX_TRIPLETS,
    MAX_VALUE,
    SHORT_SCALE,
    TEENS,
    TENS,
    UINT64_MAX,
    UNITS,
    ZERO,
    number_to_words,
)

SPLITS = ("train", "test", "eval")
DIGITS_WIDTH = len(str(MAX_VALUE))
PAD_TOKEN = "<pad>"
HYPHEN_TOKEN = "-"
# Every scaled group is "h hundred tens - ones scale"; the units group has no scale.
MAX_TOKENS = 6 * MAX_TRIPLETS - 1


def group_count(value):
    return (len(str(value)) + 2) // 3


def _group_bounds(count):
    low = 0 if count == 1 else 1000 ** (count - 1)
    return low, 1000 ** count - 1


class DataSetGenerator:
    def __init__(
        self,
        output_dir="data",
        train_size=100_000,
        test_size=10_000,
        eval_size=10_000,
        min_value=0,
        max_value=UINT64_MAX,
        seed=42,
    ):
        if min_value < 0:
            raise ValueError("min_value must be non-negative.")
        if max_value > MAX_VALUE:
            raise ValueError(f"max_value must not exceed {MAX_VALUE}.")
        if min_value > max_value:
            raise ValueError("min_value must not exceed max_value.")
        self.output_dir = output_dir
        self.train_size = train_size
        self.test_size = test_size
        self.eval_size = eval_size
        self.min_value = min_value
        self.max_value = max_value
        self.rng = random.Random(seed)
        seed_count = len(self._seed_values())
        needed = max(train_size, seed_count) + test_size + eval_size
        available = max_value - min_value + 1
        if needed > available:
            raise ValueError(
                f"Requested {needed} distinct values but only {available} "
                f"exist in [{min_value}, {max_value}]."
            )

    def _write_csv(self, path, rows):
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, "w", newline="", encoding="utf-8") as handle:
            writer = csv.writer(handle)
            writer.writerows(rows)

    def _seed_values(self):
        low = self.min_value
        high = min(1000, self.max_value)
        return set(range(low, high + 1))

    def _sample_value(self):
        count = self.rng.randint(
            group_count(self.min_value), group_count(self.max_value)
        )
        low, high = _group_bounds(count)
        return self.rng.randint(max(low, self.min_value), min(high, self.max_value))

    def _sample_train_values(self):
        values = self._seed_values()
        while len(values) < self.train_size:
            values.add(self._sample_value())
        return values

    def _sample_unique(self, size, excluded):
        values = set()
        while len(values) < size:
            value = self._sample_value()
            if value not in excluded:
                values.add(value)
        return values

    def _generate_values(self):
        train_values = self._sample_train_values()
        test_values = self._sample_unique(self.test_size, train_values)
        excluded_eval = set(train_values)
        excluded_eval.update(test_values)
        eval_values = self._sample_unique(self.eval_size, excluded_eval)
        return {
            "train": sorted(train_values),
            "test": sorted(test_values),
            "eval": sorted(eval_values),
        }

    def _write_split(self, values_by_split):
        paths = {}
        for split_name, values in values_by_split.items():
            rows = [(str(value), number_to_words(value)) for value in values]
            filename = f"words-{split_name}.csv"
            path = os.path.join(self.output_dir, filename)
            self._write_csv(path, rows)
            print(f"Wrote {filename} with {len(rows)} rows.")
            paths[split_name] = path
        return paths

    def generate_all(self):
        values_by_split = self._generate_values()
        return self._write_split(values_by_split)


def build_vocabulary():
    vocab = [PAD_TOKEN, HYPHEN_TOKEN, ZERO, HUNDRED]
    for table in (UNITS, TEENS, TENS, SHORT_SCALE):
        for word in table:
            if word and word not in vocab:
                vocab.append(word)
    return vocab


VOCABULARY = tuple(build_vocabulary())
TOKEN_IDS = {token: index for index, token in enumerate(VOCABULARY)}
PAD_ID = TOKEN_IDS[PAD_TOKEN]


def tokenize_words(words):
    tokens = []
    for word in words.split(" "):
        tens, hyphen, ones = word.partition(HYPHEN_TOKEN)
        tokens.append(tens)
        if hyphen:
            tokens.extend([HYPHEN_TOKEN, ones])
    return tokens


def encode_words(words):
    ids = []
    for token in tokenize_words(words):
        if token not in TOKEN_IDS:
            raise ValueError(f"Unknown token {token!r} in {words!r}.")
        ids.append(TOKEN_IDS[token])
    return ids


def decode_tokens(ids):
    if isinstance(ids, torch.Tensor):
        ids = ids.tolist()
    parts = []
    joined = False
    for token_id in ids:
        if token_id == PAD_ID:
            continue
        token = VOCABULARY[token_id]
        if token == HYPHEN_TOKEN:
            joined = True
            continue
        if joined and parts:
            parts[-1] = f"{parts[-1]}{HYPHEN_TOKEN}{token}"
        else:
            parts.append(token)
        joined = False
    return " ".join(parts)


class WordsDataset(Dataset):
    def __init__(self, csv_path):
        self.rows = []
        with open(csv_path, newline="", encoding="utf-8") as handle:
            reader = csv.reader(handle)
            for row in reader:
                if row:
                    self.rows.append(row)

    def __len__(self):
        return len(self.rows)

    def __getitem__(self, index):
        value_str, words = self.rows[index]
        return value_str, words


class DigitsDatasetWrapper(Dataset):
    def __init__(self, dataset, digits_width=DIGITS_WIDTH):
        self.dataset = dataset
        self.digits_width = digits_width

    def __len__(self):
        return len(self.dataset)

    def __getitem__(self, index):
        value_str, target = self.dataset[index]
        if len(value_str) > self.digits_width:
            raise ValueError(
                f"{value_str} does not fit in {self.digits_width} digits."
            )
        digits_str = value_str.zfill(self.digits_width)
        digits = torch.tensor([int(ch) for ch in digits_str], dtype=torch.float32)
        return digits, target


class DigitOneHotWrapper(Dataset):
    def __init__(self, dataset):
        self.dataset = dataset

    def __len__(self):
        return len(self.dataset)

    def __getitem__(self, index):
        digits, target = self.dataset[index]
        vector = torch.zeros(digits.numel() * 10, dtype=digits.dtype)
        for idx, value in enumerate(digits):
            vector[idx * 10 + int(value.item())] = 1.0
        return vector, target


class WordTokenWrapper(Dataset):
    def __init__(self, dataset, max_tokens=None):
        self.dataset = dataset
        self.max_tokens = MAX_TOKENS if max_tokens is None else max_tokens

    def __len__(self):
        return len(self.dataset)

    def __getitem__(self, index):
        data, words = self.dataset[index]
        ids = encode_words(words)
        if len(ids) > self.max_tokens:
            raise ValueError(
                f"{words!r} has {len(ids)} tokens, more than {self.max_tokens}."
            )
        ids.extend([PAD_ID] * (self.max_tokens - len(ids)))
        return data, torch.tensor(ids, dtype=torch.long)
