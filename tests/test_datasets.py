"""
Tests for dataset loading, splitting and serialization.
"""

import io
import tempfile
import unittest
import sys
from pathlib import Path

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from tweet_sentiment.datasets import (
    Record,
    SentimentDataset,
    canonicalize_labels,
    load_labeled_tweets,
)
from tweet_sentiment.exceptions import (
    DatasetWriteError,
    InvalidArgumentError,
    InvalidInputError,
    UnknownLabelError,
)
from tweet_sentiment.labels import Label
from tweet_sentiment.sampling import split_dataset, training_line
from tweet_sentiment.serialization import (
    read_test_set,
    read_training_lines,
    write_test_set,
    write_train_set,
)


CSV = (
    "Date,Tweet,Screen_name,Tag\n"
    "2018-03-23,Bitcoin is great,alice,['positive']\n"
    "2018-03-23,,bob,['neutral']\n"
    "2018-03-24,BTC crashed again,carol,['negative']\n"
    "2018-03-24,Holding my coins,dave,['neutral']\n"
)


def make_dataset(n: int) -> SentimentDataset:
    labels = [Label.POSITIVE, Label.NEUTRAL, Label.NEGATIVE]
    return SentimentDataset(
        text=[f"tweet {i}" for i in range(n)],
        label=[labels[i % 3] for i in range(n)],
    )


class TestLoadLabeledTweets(unittest.TestCase):
    """Tests for the CSV loader."""

    def test_drops_incomplete_rows_before_limit(self):
        """Rows with missing text are dropped, then the limit applies."""
        ds = load_labeled_tweets(io.StringIO(CSV), 3)
        self.assertEqual(ds.text, ["Bitcoin is great", "BTC crashed again", "Holding my coins"])
        self.assertEqual(ds.label, ["['positive']", "['negative']", "['neutral']"])

    def test_limit_keeps_first_rows(self):
        """Only the first `limit` rows are kept, in file order."""
        ds = load_labeled_tweets(io.StringIO(CSV), 2)
        self.assertEqual(len(ds), 2)
        self.assertEqual(ds.text[0], "Bitcoin is great")

    def test_limit_too_large(self):
        """Asking for more rows than available is an error."""
        with self.assertRaises(InvalidInputError):
            load_labeled_tweets(io.StringIO(CSV), 4)

    def test_limit_not_positive(self):
        """A zero limit is rejected."""
        with self.assertRaises(InvalidInputError):
            load_labeled_tweets(io.StringIO(CSV), 0)

    def test_missing_column(self):
        """Missing required columns are reported."""
        with self.assertRaises(InvalidInputError):
            load_labeled_tweets(io.StringIO("Tweet,Sentiment\nhello,positive\n"), 1)

    def test_custom_columns(self):
        """Column names are configurable."""
        ds = load_labeled_tweets(
            io.StringIO("body,tag\nhello,[[positive]]\n"), 1, text_column="body", label_column="tag"
        )
        self.assertEqual(list(ds.records()), [Record("hello", "[[positive]]")])

    def test_canonicalize_labels(self):
        """Tags become Labels without reordering rows."""
        ds = canonicalize_labels(load_labeled_tweets(io.StringIO(CSV), 3))
        self.assertEqual(ds.label, [Label.POSITIVE, Label.NEGATIVE, Label.NEUTRAL])
        self.assertEqual(ds.text[1], "BTC crashed again")

    def test_canonicalize_unknown(self):
        """An unknown tag aborts canonicalization."""
        ds = SentimentDataset(text=["x"], label=["['bullish']"])
        with self.assertRaises(UnknownLabelError):
            canonicalize_labels(ds)

    def test_misaligned_dataset(self):
        """Text and label columns must have the same length."""
        with self.assertRaises(InvalidInputError):
            SentimentDataset(text=["a", "b"], label=[Label.POSITIVE])


class TestSplitDataset(unittest.TestCase):
    """Tests for the train/test split."""

    def test_partition_sizes_and_disjointness(self):
        """Every record lands in exactly one partition."""
        ds = make_dataset(10)
        split = split_dataset(ds, 0.8, random_state=0)

        self.assertEqual(len(split.train), 8)
        self.assertEqual(len(split.test), 2)
        self.assertEqual(set(split.train_index) & set(split.test_index), set())
        self.assertEqual(sorted(split.train_index + split.test_index), list(range(10)))

    def test_rows_follow_indices(self):
        """Partition rows are the source rows at the recorded positions."""
        ds = make_dataset(20)
        split = split_dataset(ds, 0.5, random_state=3)
        for pos, text, label in zip(split.test_index, split.test.text, split.test.label):
            self.assertEqual(text, ds.text[pos])
            self.assertEqual(label, ds.label[pos])

    def test_seed_is_reproducible(self):
        """The same seed gives the same split."""
        ds = make_dataset(30)
        a = split_dataset(ds, 0.7, random_state=42)
        b = split_dataset(ds, 0.7, random_state=42)
        self.assertEqual(a.train_index, b.train_index)

    def test_stratified(self):
        """Stratification keeps one test row per label here."""
        ds = make_dataset(12)
        split = split_dataset(ds, 0.75, random_state=1, stratify=True)
        self.assertEqual(sorted(split.test.label), sorted([Label.POSITIVE, Label.NEUTRAL, Label.NEGATIVE]))

    def test_fraction_out_of_range(self):
        """Fractions outside (0, 1) are rejected."""
        ds = make_dataset(10)
        for p in (0, 1, 1.5, -0.2):
            with self.assertRaises(InvalidArgumentError):
                split_dataset(ds, p)

    def test_too_small(self):
        """A dataset that cannot fill both partitions is rejected."""
        with self.assertRaises(InvalidInputError):
            split_dataset(make_dataset(1), 0.5)

    def test_training_line(self):
        """Train records are a single '<Label> <text>' field."""
        self.assertEqual(training_line(Label.POSITIVE, "to the moon "), "Positive to the moon ")


class TestSerialization(unittest.TestCase):
    """Tests for the train/test file writers and readers."""

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.dir = Path(self.tmp.name)

    def tearDown(self):
        self.tmp.cleanup()

    def test_write_train_set_skips_empty_examples(self):
        """Lines with only a label are dropped."""
        path = self.dir / "trainset.txt"
        written = write_train_set(["Positive good ", "Neutral ", "Negative bad ", "positive "], path)

        self.assertEqual(written, 2)
        self.assertEqual(path.read_text(encoding="utf-8"), "Positive good \nNegative bad \n")

    def test_write_train_set_keeps_first_line(self):
        """The first line is written even when it is empty."""
        path = self.dir / "trainset.txt"
        write_train_set(["Neutral ", "Positive ok "], path)
        self.assertEqual(path.read_text(encoding="utf-8").splitlines(), ["Neutral ", "Positive ok "])

    def test_write_train_set_creates_directories(self):
        """Missing parent directories are created."""
        path = self.dir / "nested" / "out" / "trainset.txt"
        write_train_set(["Positive ok "], path)
        self.assertTrue(path.exists())

    def test_write_and_read_test_set(self):
        """Blank texts are skipped in both files so lines stay aligned."""
        ds = SentimentDataset(
            text=["", "fine", "  ", "bad"],
            label=[Label.NEUTRAL, Label.POSITIVE, Label.NEUTRAL, Label.NEGATIVE],
        )
        text_path, tag_path = self.dir / "testset.txt", self.dir / "testsettag.txt"

        self.assertEqual(write_test_set(ds, text_path, tag_path), 3)
        self.assertEqual(tag_path.read_text(encoding="utf-8"), "Neutral\nPositive\nNegative\n")

        texts, labels = read_test_set(text_path, tag_path)
        self.assertEqual(texts, ["", "fine", "bad"])
        self.assertEqual(labels, [Label.NEUTRAL, Label.POSITIVE, Label.NEGATIVE])

    def test_read_test_set_stops_at_shorter_file(self):
        """Reading stops when either file runs out."""
        text_path, tag_path = self.dir / "t.txt", self.dir / "g.txt"
        text_path.write_text("a\nb\nc\n", encoding="utf-8")
        tag_path.write_text("positive\nnegative\n", encoding="utf-8")

        texts, labels = read_test_set(text_path, tag_path)
        self.assertEqual(texts, ["a", "b"])
        self.assertEqual(labels, [Label.POSITIVE, Label.NEGATIVE])

    def test_unwritable_destination(self):
        """Write failures surface as DatasetWriteError (an OSError)."""
        blocker = self.dir / "blocker"
        blocker.write_text("", encoding="utf-8")

        with self.assertRaises(DatasetWriteError) as ctx:
            write_train_set(["Positive ok "], blocker / "trainset.txt")
        self.assertIsInstance(ctx.exception, OSError)

    def test_read_training_lines(self):
        """Train lines parse into (label, tokens); blank lines are ignored."""
        path = self.dir / "trainset.txt"
        path.write_text("Positive good day \n\nNegative bad \n", encoding="utf-8")

        self.assertEqual(
            list(read_training_lines(path)),
            [("Positive", ["good", "day"]), ("Negative", ["bad"])],
        )


if __name__ == '__main__':
    unittest.main()
