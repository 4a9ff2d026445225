"""Tests for the image classifier."""

from screenshot_table.parsers.tag_extractor import extract_tags
from screenshot_table.transformers.image_classifier import classify
from schemas.raw_tag import RawTag


class TestClassify:
    """Tests for classify."""

    def test_classifies_prefixed_labels(self, feature_html):
        """Records carry parsed names, roles and orders."""
        images = classify(extract_tags(feature_html))

        assert len(images) == 4
        assert [(i.order, i.display_name, i.role) for i in images] == [
            (1, "Feature 1", "before"),
            (2, "Feature 25", "before"),
            (3, "Feature 32", "standalone"),
            (4, "Feature 54", "after"),
        ]

    def test_handles_labels_without_prefixes(self, unprefixed_html):
        """Unprefixed labels get order 0 and keep document order."""
        images = classify(extract_tags(unprefixed_html))

        assert len(images) == 3
        assert [(i.order, i.display_name, i.role) for i in images] == [
            (0, "standalone1", "standalone"),
            (0, "category", "before"),
            (0, "category", "after"),
        ]

    def test_sorts_by_order(self):
        """Records are sorted by order ascending."""
        tags = [
            RawTag(alt_text="3 third", src="3.png"),
            RawTag(alt_text="1 first", src="1.png"),
            RawTag(alt_text="2 second", src="2.png"),
        ]

        assert [i.src for i in classify(tags)] == ["1.png", "2.png", "3.png"]

    def test_sort_is_stable(self):
        """Records sharing an order keep their input order."""
        tags = [
            RawTag(alt_text="2 b", src="b.png"),
            RawTag(alt_text="zeta", src="z.png"),
            RawTag(alt_text="2 a", src="a.png"),
            RawTag(alt_text="alpha", src="alpha.png"),
        ]

        assert [i.src for i in classify(tags)] == ["z.png", "alpha.png", "b.png", "a.png"]

    def test_keeps_src_and_label(self):
        """src and the original label are copied onto the record."""
        [image] = classify([RawTag(alt_text="1. Feature_1_before", src="one.png")])

        assert image.src == "one.png"
        assert image.label == "1. Feature_1_before"
        assert image.category == "Feature 1"

    def test_does_not_mutate_input(self):
        """The input list is left untouched."""
        tags = [RawTag(alt_text="2 b", src="b.png"), RawTag(alt_text="1 a", src="a.png")]
        classify(tags)

        assert [t.src for t in tags] == ["b.png", "a.png"]

    def test_empty_input(self):
        """Returns empty list for no tags."""
        assert classify([]) == []
