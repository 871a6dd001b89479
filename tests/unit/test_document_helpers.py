"""Tests for upload filename, type and size helpers."""

import pytest

from firmdesk.application.services.document_service import (
    display_size,
    file_type,
    sanitize_filename,
)


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("contract.pdf", "contract.pdf"),
        ("../../etc/passwd", "passwd"),
        ("C:\\Users\\jane\\brief.docx", "brief.docx"),
        ("  spaced.txt  ", "spaced.txt"),
        ("nul\x00byte.txt", "nulbyte.txt"),
        ("", "upload"),
        (None, "upload"),
        ("dir/", "upload"),
    ],
)
def test_sanitize_filename(raw, expected) -> None:
    assert sanitize_filename(raw) == expected


def test_file_type_is_upper_extension() -> None:
    assert file_type("contract.pdf") == "PDF"
    assert file_type("archive.tar.gz") == "GZ"
    assert file_type("README") == ""


@pytest.mark.parametrize(
    "num_bytes,expected",
    [(0, "0 KB"), (511, "0 KB"), (512, "1 KB"), (1024, "1 KB"), (1536, "2 KB"), (10240, "10 KB")],
)
def test_display_size_rounds_half_up(num_bytes: int, expected: str) -> None:
    assert display_size(num_bytes) == expected
