from __future__ import annotations


def parse_cost_range(text: str) -> tuple[int, int]:
    """
    Parse a "$min-$max" cost string into integers.

    Thousands separators are stripped ("$1,000-$3,000" -> (1000, 3000)).
    Raises ValueError for a missing separator, a non-numeric half,
    or min > max.
    """
    if "-" not in (text or ""):
        raise ValueError(f"Cost range must look like '$min-$max': {text!r}")

    low_text, high_text = text.split("-", 1)
    low = _parse_amount(low_text, text)
    high = _parse_amount(high_text, text)
    if low > high:
        raise ValueError(f"Cost range minimum exceeds maximum: {text!r}")
    return low, high


def _parse_amount(part: str, original: str) -> int:
    cleaned = part.strip().removeprefix("$").replace(",", "").strip()
    if not cleaned.isdigit():
        raise ValueError(f"Cost range has a non-numeric amount: {original!r}")
    return int(cleaned)
