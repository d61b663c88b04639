import argparse

from data_generation import DataSetGenerator
from number_words import UINT64_MAX


def main(argv=None):
    parser = cmdline_parser()
    args = parser.parse_args(argv)

    if args.data_probe:
        from data_probes import run_data_probes

        output_path = run_data_probes(
            data_dir=args.output_dir, open_browser=args.browser
        )
        print(f"Wrote probe report to {output_path}")
        return

    if args.generate_data:
        try:
            generator = DataSetGenerator(
                output_dir=args.output_dir,
                train_size=args.train_size,
                test_size=args.test_size,
                eval_size=args.eval_size,
                min_value=args.min_value,
                max_value=args.max_value,
                seed=args.seed,
            )
        except ValueError as exc:
            parser.error(str(exc))
        generator.generate_all()
        return

    parser.print_help()


def cmdline_parser():
    parser = argparse.ArgumentParser(
        description="Spelled-number dataset utilities.",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--generate-data",
        action="store_true",
        help="Generate train/test/eval spelled-number splits under --output-dir.",
    )
    group.add_argument(
        "--data-probe",
        action="store_true",
        help="Generate probes for the splits under --output-dir and open the report.",
    )
    parser.add_argument(
        "--output-dir",
        default="data",
        help="Directory holding the generated splits.",
    )
    parser.add_argument(
        "--train-size",
        type=int,
        default=100_000,
        help="Training set size for data generation (includes 0..1000).",
    )
    parser.add_argument(
        "--test-size",
        type=int,
        default=10_000,
        help="Test set size for data generation.",
    )
    parser.add_argument(
        "--eval-size",
        type=int,
        default=10_000,
        help="Eval set size for data generation.",
    )
    parser.add_argument(
        "--min-value",
        type=int,
        default=0,
        help="Smallest value to sample for data generation.",
    )
    parser.add_argument(
        "--max-value",
        type=int,
        default=UINT64_MAX,
        help="Largest value to sample for data generation.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=42,
        help="Random seed for data generation.",
    )
    parser.add_argument(
        "--no-browser",
        action="store_false",
        dest="browser",
        help="Do not open the probe report in a browser.",
    )

    return parser


if __name__ == "__main__":
    main()
