import contextlib
import csv
import io
import os
import random
import tempfile
import unittest

from data_generation import SPLITS, DataSetGenerator, group_count
from number_words import MAX_VALUE, UINT64_MAX, number_to_words


def _read_split(directory, split):
    path = os.path.join(directory, f"words-{split}.csv")
    with open(path, newline="", encoding="utf-8") as handle:
        return [row for row in csv.reader(handle) if row]


class TestDatasetGeneration(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.temp_dir = tempfile.TemporaryDirectory()
        generator = DataSetGenerator(
            output_dir=cls.temp_dir.name,
            train_size=3_000,
            test_size=500,
            eval_size=500,
        )
        with contextlib.redirect_stdout(io.StringIO()) as output:
            cls.paths = generator.generate_all()
        cls.output = output.getvalue()
        cls.rows = {}
        cls.values = {}
        for split in SPLITS:
            rows = _read_split(cls.temp_dir.name, split)
            cls.rows[split] = rows
            cls.values[split] = {int(row[0]) for row in rows}

    @classmethod
    def tearDownClass(cls):
        cls.temp_dir.cleanup()

    def _sample_rows(self, rows, count, rng):
        if len(rows) <= count:
            return rows
        return rng.sample(rows, count)

    def test_reports_written_files(self):
        for split in SPLITS:
            count = len(self.rows[split])
            self.assertIn(f"Wrote words-{split}.csv with {count} rows.", self.output)
            self.assertTrue(os.path.isfile(self.paths[split]))

    def test_split_sizes(self):
        self.assertEqual(len(self.rows["train"]), 3_000)
        self.assertEqual(len(self.rows["test"]), 500)
        self.assertEqual(len(self.rows["eval"]), 500)

    def test_words_match_value(self):
        rng = random.Random(1729)
        for split in SPLITS:
            rows = self._sample_rows(self.rows[split], 200, rng)
            for value_str, words in rows:
                self.assertEqual(number_to_words(int(value_str)), words)

    def test_rows_sorted(self):
        for split in SPLITS:
            values = [int(row[0]) for row in self.rows[split]]
            self.assertEqual(values, sorted(values))

    def test_values_in_range(self):
        for split in SPLITS:
            for value in self.values[split]:
                self.assertGreaterEqual(value, 0)
                self.assertLessEqual(value, UINT64_MAX)

    def test_train_contains_0_to_1000(self):
        train_values = self.values["train"]
        for value in range(0, 1001):
            self.assertIn(value, train_values)

    def test_train_covers_every_group_count(self):
        counts = {group_count(value) for value in self.values["train"]}
        self.assertEqual(counts, set(range(1, group_count(UINT64_MAX) + 1)))

    def test_train_test_disjoint(self):
        self.assertFalse(self.values["train"].intersection(self.values["test"]))

    def test_eval_disjoint_from_train_test(self):
        eval_values = self.values["eval"]
        self.assertFalse(eval_values.intersection(self.values["train"]))
        self.assertFalse(eval_values.intersection(self.values["test"]))


class TestDatasetGeneratorConfig(unittest.TestCase):
    def test_same_seed_same_values(self):
        first = DataSetGenerator(train_size=1_200, test_size=50, eval_size=50, seed=3)
        second = DataSetGenerator(train_size=1_200, test_size=50, eval_size=50, seed=3)
        self.assertEqual(first._generate_values(), second._generate_values())

    def test_narrow_range(self):
        generator = DataSetGenerator(
            train_size=10,
            test_size=5,
            eval_size=5,
            min_value=5_000,
            max_value=5_019,
        )
        values = generator._generate_values()
        combined = set()
        for split in SPLITS:
            combined.update(values[split])
        self.assertEqual(combined, set(range(5_000, 5_020)))

    def test_rejects_invalid_bounds(self):
        with self.assertRaises(ValueError):
            DataSetGenerator(min_value=-1)
        with self.assertRaises(ValueError):
            DataSetGenerator(max_value=MAX_VALUE + 1)
        with self.assertRaises(ValueError):
            DataSetGenerator(min_value=10, max_value=5)

    def test_rejects_oversized_splits(self):
        with self.assertRaises(ValueError):
            DataSetGenerator(
                train_size=10, test_size=10, eval_size=10, min_value=2_000, max_value=2_020
            )


if __name__ == "__main__":
    unittest.main()
