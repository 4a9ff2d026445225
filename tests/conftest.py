"""Pytest fixtures for Screenshot Table tests."""

import pytest

from schemas.image_record import ImageRecord


@pytest.fixture
def feature_html():
    """HTML as GitHub produces it when screenshots are dropped into a PR body."""
    return """
    <img width="1170" height="2532" alt="1. Feature_1_before" src="https://github.com/user-attachments/assets/1.jpg" />
    <img width="1170" height="2532" alt="2.Feature 25_before" src="https://github.com/user-attachments/assets/2.jpg" />
    <img width="1170" height="2532" alt="3 Feature 32" src="https://github.com/user-attachments/assets/3.jpg" />
    <img width="1170" height="2532" alt="4feature54_after" src="https://github.com/user-attachments/assets/4.jpg" />
    """


@pytest.fixture
def unprefixed_html():
    """HTML with labels that carry no order prefix."""
    return """
    <img alt="standalone1" src="https://example.com/img1.jpg" />
    <img alt="category_before" src="https://example.com/img3.jpg" />
    <img alt="category_after" src="https://example.com/img4.jpg" />
    """


@pytest.fixture
def make_record():
    """Factory for ImageRecords with sensible defaults."""

    def _make(display_name, src=None, role="standalone", order=0):
        return ImageRecord(
            display_name=display_name,
            src=src or f"https://example.com/{display_name.replace(' ', '-')}-{role}.png",
            role=role,
            order=order,
        )

    return _make
