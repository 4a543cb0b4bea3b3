"""Tests for build configuration models."""

import unittest
from pathlib import Path

from pydantic import ValidationError

from ampstyles.models import BuildConfig, MediaBucket


class TestBuildConfig(unittest.TestCase):
    def test_defaults(self) -> None:
        config = BuildConfig()
        self.assertEqual([b.filename for b in config.buckets], ["site.css", "amp.css"])
        self.assertEqual([b.media for b in config.buckets], ["all", "all"])
        self.assertEqual(config.output_style, "compressed")
        self.assertEqual(config.amp_filename, "amp.css")

    def test_paths_coerced(self) -> None:
        config = BuildConfig(source_dir="src", output_dir="out")
        self.assertEqual(config.source_dir, Path("src"))
        self.assertEqual(config.output_dir, Path("out"))

    def test_duplicate_bucket_filenames_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            BuildConfig(buckets=[{"filename": "a.css"}, {"media": "print", "filename": "a.css"}])

    def test_empty_buckets_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            BuildConfig(buckets=[])


class TestMediaBucket(unittest.TestCase):
    def test_filename_must_be_bare(self) -> None:
        with self.assertRaises(ValidationError):
            MediaBucket(filename="../amp.css")

    def test_queries_normalized(self) -> None:
        bucket = MediaBucket(media=["  Print ", "screen and\n(min-width: 1px)"], filename="m.css")
        self.assertEqual(bucket.queries(), ["print", "screen and (min-width: 1px)"])

    def test_empty_query_list_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            MediaBucket(media=[], filename="m.css")


if __name__ == "__main__":
    unittest.main()
