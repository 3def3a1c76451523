from __future__ import annotations

import re

from .models import MAX_GOAL_SIZE


_SIZE_PATTERN = re.compile(r"^\s*(\d+(?:\.\d*)?|\.\d+)\s*([a-z]*)\s*$", re.IGNORECASE)
_PREFIXES = "kmgtpe"
_BINARY_UNITS = ["KiB", "MiB", "GiB", "TiB", "PiB", "EiB"]


def _unit_multiplier(unit: str) -> int:
    normalized = unit.lower()
    if normalized in {"", "b"}:
        return 1

    prefix = normalized[0]
    rest = normalized[1:]
    if prefix not in _PREFIXES:
        raise ValueError(f"Unknown size unit '{unit}'")

    power = _PREFIXES.index(prefix) + 1
    if rest in {"", "b"}:
        return 1000**power
    if rest in {"i", "ib"}:
        return 1024**power
    raise ValueError(f"Unknown size unit '{unit}'")


def parse_size(text: str) -> int:
    """Parse a byte count such as ``512``, ``10MB``, ``1.5 GiB`` or ``4k``.

    Decimal prefixes (``kb``, ``mb``...) are powers of 1000, binary prefixes
    (``kib``, ``mib``...) are powers of 1024. Fractions are truncated to
    whole bytes.
    """
    match = _SIZE_PATTERN.match(str(text or ""))
    if not match:
        raise ValueError(f"Invalid size '{text}'")

    number, unit = match.group(1), match.group(2)
    multiplier = _unit_multiplier(unit)
    if "." in number:
        whole, _, fraction = number.partition(".")
        scale = 10 ** len(fraction)
        value = (int(whole or "0") * scale + int(fraction or "0")) * multiplier // scale
    else:
        value = int(number) * multiplier

    if value > MAX_GOAL_SIZE:
        raise ValueError(f"Size '{text}' does not fit in 64 bits")
    return value


def format_size(num_bytes: int) -> str:
    value = float(num_bytes)
    if abs(value) < 1024:
        return f"{int(num_bytes)} B"

    for unit in _BINARY_UNITS:
        value /= 1024
        if abs(value) < 1024 or unit == _BINARY_UNITS[-1]:
            break
    return f"{value:.1f} {unit}"
