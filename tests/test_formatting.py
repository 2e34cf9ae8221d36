"""Tests for attachment display helpers."""

import pytest

from libboard.utils.formatting import file_type_of, format_file_size


@pytest.mark.parametrize("size, expected", [
    (0, "0B"),
    (1023, "1023B"),
    (1024, "1.0 KB"),
    (1536, "1.5 KB"),
    (5 * 1024 * 1024, "5.0 MB"),
    (3 * 1024 * 1024 * 1024, "3.0 GB"),
])
def test_format_file_size(size, expected):
    assert format_file_size(size) == expected


@pytest.mark.parametrize("extension, expected", [
    ("JPG", "image"),
    ("pdf", "pdf"),
    ("hwp", "document"),
    ("xlsx", "excel"),
    ("pptx", "powerpoint"),
    ("zip", "archive"),
    ("txt", "text"),
    ("bin", "default"),
    ("", "default"),
])
def test_file_type_of(extension, expected):
    assert file_type_of(extension) == expected
