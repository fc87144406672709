from typing import Iterable, List


def band_to_hex(band: int) -> str:
    """Two-digit, zero-padded, lowercase hex for one band."""
    return format(band, "02x")


def bands_to_hex(bands: Iterable[int]) -> str:
    return "".join(band_to_hex(band) for band in bands)


def split_long_hex(digits: str) -> List[str]:
    """'ff0080' -> ['ff', '00', '80']"""
    return [digits[i:i + 2] for i in range(0, 6, 2)]


def expand_short_hex(digits: str) -> List[str]:
    """'f08' -> ['ff', '00', '88']"""
    return [digit * 2 for digit in digits]
