from __future__ import annotations

import pytest

from dir_limiter.units import format_size, parse_size


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("0", 0),
        ("512", 512),
        ("100B", 100),
        ("4k", 4_000),
        ("10MB", 10_000_000),
        ("10 mb", 10_000_000),
        ("1KiB", 1_024),
        ("1.5 KiB", 1_536),
        ("2gib", 2 * 1024**3),
        ("1.5GB", 1_500_000_000),
        ("0.5", 0),
    ],
)
def test_parse_size_accepts_units(text: str, expected: int) -> None:
    assert parse_size(text) == expected


@pytest.mark.parametrize("text", ["", "abc", "-5", "10 XB", "1.2.3", "5 kibibytes", "20EiB"])
def test_parse_size_rejects_invalid_values(text: str) -> None:
    with pytest.raises(ValueError):
        parse_size(text)


def test_format_size_uses_binary_units() -> None:
    assert format_size(0) == "0 B"
    assert format_size(1023) == "1023 B"
    assert format_size(1024) == "1.0 KiB"
    assert format_size(1536) == "1.5 KiB"
    assert format_size(5 * 1024**2) == "5.0 MiB"
    assert format_size(3 * 1024**3) == "3.0 GiB"
