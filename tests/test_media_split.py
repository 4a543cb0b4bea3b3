"""Tests for media bucket splitting."""

import unittest

from ampstyles.blobs import CssBlob
from ampstyles.css.media import split_media
from ampstyles.errors import BucketConfigError
from ampstyles.models import MediaBucket, default_buckets

CSS = "a{color:blue}@media print{a{color:red}}@media screen and (max-width: 700px){b{margin:0}}c{x:y}"


class TestSplitMedia(unittest.TestCase):
    def test_default_buckets_copy_everything(self) -> None:
        blobs = [CssBlob("site.css", CSS)]
        site, amp = split_media(blobs, default_buckets())
        self.assertEqual(site.path, "site.css")
        self.assertEqual(amp.path, "amp.css")
        self.assertEqual(site.contents, CSS)
        self.assertEqual(amp.contents, CSS)

    def test_outputs_stay_next_to_source(self) -> None:
        blobs = [CssBlob("themes/dark/site.css", CSS)]
        out = split_media(blobs, default_buckets())
        self.assertEqual([b.path for b in out], ["themes/dark/site.css", "themes/dark/amp.css"])
        self.assertEqual(out[1].history, ("themes/dark/site.css",))

    def test_one_output_per_bucket_per_blob_in_order(self) -> None:
        blobs = [CssBlob("a/site.css", "a{}"), CssBlob("b/site.css", "b{}")]
        out = split_media(blobs, default_buckets())
        self.assertEqual(
            [b.path for b in out],
            ["a/site.css", "a/amp.css", "b/site.css", "b/amp.css"],
        )

    def test_none_bucket_drops_media_blocks(self) -> None:
        (out,) = split_media([CssBlob("site.css", CSS)], [MediaBucket(media="none", filename="base.css")])
        self.assertIn("a{color:blue}", out.contents)
        self.assertIn("c{x:y}", out.contents)
        self.assertNotIn("@media", out.contents)

    def test_query_bucket_selects_matching_block(self) -> None:
        bucket = MediaBucket(media="Screen and  (max-width: 700px)", filename="narrow.css")
        (out,) = split_media([CssBlob("site.css", CSS)], [bucket])
        self.assertIn("@media", out.contents)
        self.assertIn("b{margin:0}", out.contents)
        self.assertNotIn("color:red", out.contents)
        self.assertNotIn("c{x:y}", out.contents)

    def test_query_list(self) -> None:
        bucket = MediaBucket(media=["print", "screen and (max-width: 700px)"], filename="m.css")
        (out,) = split_media([CssBlob("site.css", CSS)], [bucket])
        self.assertIn("color:red", out.contents)
        self.assertIn("b{margin:0}", out.contents)
        self.assertNotIn("color:blue", out.contents)

    def test_duplicate_filenames_rejected(self) -> None:
        buckets = [MediaBucket(filename="x.css"), MediaBucket(filename="x.css")]
        with self.assertRaises(BucketConfigError):
            split_media([CssBlob("site.css", CSS)], buckets)

    def test_no_buckets_rejected(self) -> None:
        with self.assertRaises(BucketConfigError):
            split_media([CssBlob("site.css", CSS)], [])


if __name__ == "__main__":
    unittest.main()
