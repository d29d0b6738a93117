"""Tests for batch processing."""
import shutil
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from toggl_reports.batch import iter_documents, process_batch
from toggl_reports.errors import (
    DirectoryListingError,
    DurationNotFoundError,
    PeriodNotFoundError,
    TextExtractionError,
)

REPORTS = {
    "01_jan_a.pdf": "Summary report\n2023-01-05 - 2023-01-19\nTotal 10 h 0 min",
    "02_jan_b.pdf": "January 20, 2023 – January 31, 2023\nTOTAL HOURS: 7:30:00",
    "03_feb.pdf": "02/03/2023 – 02/28/2023\nTotal 3 h 15 min",
    "04_no_period.pdf": "Total 1 h 0 min",
    "05_no_hours.pdf": "01-03-2023 - 31-03-2023",
    "06_mar.pdf": "01-03-2023 - 31-03-2023\nTotal 2 h 0 min",
}


class TestProcessBatch(unittest.TestCase):
    """Test process_batch with an in-memory text extractor."""

    def setUp(self):
        """Set up test fixtures."""
        self.test_dir = Path(tempfile.mkdtemp())
        self.texts = {}
        for name, text in REPORTS.items():
            path = self.test_dir / name
            path.write_bytes(b"%PDF-1.4\n")
            self.texts[path] = text

    def tearDown(self):
        """Clean up test fixtures."""
        shutil.rmtree(self.test_dir, ignore_errors=True)

    def extract(self, path):
        return self.texts.get(path)

    def paths(self, *names):
        return [self.test_dir / name for name in names]

    def test_combines_and_skips_failures(self):
        """Test failed documents are reported and the batch continues."""
        result = process_batch(
            self.paths(
                "01_jan_a.pdf",
                "02_jan_b.pdf",
                "04_no_period.pdf",
                "03_feb.pdf",
                "05_no_hours.pdf",
                "06_mar.pdf",
            ),
            extractor=self.extract,
        )

        self.assertEqual(result.documents, 6)
        self.assertEqual(len(result.aggregates), 3)
        self.assertEqual(len(result.records), 4)
        self.assertEqual(result.aggregates[0].total_hours_string, "17:30:00")
        self.assertEqual(result.aggregates[0].period_string, "2023-01-05 - 2023-01-19")
        self.assertEqual(result.aggregates[1].total_hours_string, "3:15:00")
        self.assertEqual(result.aggregates[2].period_string, "2023-03-01 - 2023-03-31")

        self.assertEqual(len(result.errors), 2)
        self.assertIsInstance(result.errors[0], PeriodNotFoundError)
        self.assertEqual(result.errors[0].path, self.test_dir / "04_no_period.pdf")
        self.assertIsInstance(result.errors[1], DurationNotFoundError)
        self.assertTrue(result.has_errors)

    def test_rejected_document_adds_nothing(self):
        """Test a document without a period contributes no rows."""
        result = process_batch(self.paths("04_no_period.pdf"), extractor=self.extract)

        self.assertEqual(result.aggregates, [])
        self.assertEqual(result.total_seconds, 0)
        self.assertIsInstance(result.errors[0], PeriodNotFoundError)

    def test_errors_reported_per_occurrence(self):
        """Test the same failing document is reported each time."""
        result = process_batch(
            self.paths("04_no_period.pdf", "04_no_period.pdf"),
            extractor=self.extract,
        )
        self.assertEqual(len(result.errors), 2)

    def test_no_combine(self):
        """Test one row per document when combining is off."""
        result = process_batch(
            self.paths("01_jan_a.pdf", "02_jan_b.pdf"),
            extractor=self.extract,
            combine=False,
        )
        self.assertEqual(len(result.aggregates), 2)

    def test_directory_input(self):
        """Test directories are read in name order, skipping nested folders and non-PDFs."""
        (self.test_dir / "nested").mkdir()
        (self.test_dir / "nested" / "07_apr.pdf").write_bytes(b"%PDF-1.4\n")
        (self.test_dir / "notes.txt").write_text("2023-01-05 - 2023-01-19 Total 1 h 0 min")

        result = process_batch([self.test_dir], extractor=self.extract)

        self.assertEqual(result.documents, 6)
        self.assertEqual(len(result.records), 4)
        self.assertEqual(len(result.aggregates), 3)

    def test_missing_text(self):
        """Test documents with no text are reported."""
        empty = self.test_dir / "empty.pdf"
        empty.write_bytes(b"%PDF-1.4\n")

        result = process_batch([empty], extractor=self.extract)
        self.assertIsInstance(result.errors[0], TextExtractionError)

    def test_missing_file(self):
        """Test a path that does not exist is reported and skipped."""
        result = process_batch(
            self.paths("missing.pdf", "03_feb.pdf"),
            extractor=self.extract,
        )
        self.assertIsInstance(result.errors[0], FileNotFoundError)
        self.assertEqual(len(result.aggregates), 1)

    def test_directory_listing_error_stops_batch(self):
        """Test a listing failure keeps earlier rows and stops the batch."""
        unreadable = self.test_dir / "unreadable"
        unreadable.mkdir()
        original_iterdir = Path.iterdir

        def iterdir(path):
            if path == unreadable:
                raise PermissionError("permission denied")
            return original_iterdir(path)

        with mock.patch.object(Path, "iterdir", iterdir):
            result = process_batch(
                self.paths("01_jan_a.pdf") + [unreadable] + self.paths("03_feb.pdf"),
                extractor=self.extract,
            )

        self.assertEqual(len(result.aggregates), 1)
        self.assertEqual(len(result.errors), 1)
        self.assertIsInstance(result.errors[0], DirectoryListingError)
        self.assertEqual(result.errors[0].path, unreadable)

    def test_new_batch_replaces_previous(self):
        """Test results do not carry over between batches."""
        first = process_batch(self.paths("01_jan_a.pdf"), extractor=self.extract)
        second = process_batch(self.paths("02_jan_b.pdf"), extractor=self.extract)

        self.assertEqual(len(first.records), 1)
        self.assertEqual(len(second.records), 1)
        self.assertEqual(second.aggregates[0].total_hours_string, "7:30:00")


class TestIterDocuments(unittest.TestCase):
    """Test iter_documents."""

    def setUp(self):
        """Set up test fixtures."""
        self.test_dir = Path(tempfile.mkdtemp())

    def tearDown(self):
        """Clean up test fixtures."""
        shutil.rmtree(self.test_dir, ignore_errors=True)

    def test_files_pass_through_in_order(self):
        """Test explicit files are yielded as given, whatever their suffix."""
        paths = [self.test_dir / "b.PDF", self.test_dir / "a.txt"]
        self.assertEqual(list(iter_documents(paths)), paths)

    def test_directory_pdf_suffix_case_insensitive(self):
        """Test upper-case PDF suffixes are picked up from directories."""
        (self.test_dir / "B.PDF").write_bytes(b"")
        (self.test_dir / "a.pdf").write_bytes(b"")

        names = [path.name for path in iter_documents([self.test_dir])]
        self.assertEqual(names, sorted(["B.PDF", "a.pdf"]))


if __name__ == "__main__":
    unittest.main()
