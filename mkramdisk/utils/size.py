#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Size parsing for mkramdisk.
Turns a human-entered size token (``512M``, ``1G``, ``2048K``) into a count
of 512-byte sectors.
"""
from typing import Dict, Tuple

from mkramdisk.errors import (
    BelowMinimumError,
    InvalidNumberError,
    SizeOverflowError,
    UnknownSuffixError,
    ZeroSizeError,
)
from mkramdisk.models import SECTOR_SIZE

# Sizes are computed as unsigned 64-bit quantities.
U64_MAX = 2**64 - 1

SIZE_MULTIPLIERS: Dict[str, int] = {
    "": 1,
    "B": 1,
    "K": 1024,
    "KB": 1024,
    "M": 1024**2,
    "MB": 1024**2,
    "G": 1024**3,
    "GB": 1024**3,
    "T": 1024**4,
    "TB": 1024**4,
}


def split_size(token: str) -> Tuple[str, str]:
    """Split an upper-cased token at its first alphabetic character."""
    for pos, char in enumerate(token):
        if char.isalpha():
            return token[:pos], token[pos:]
    return token, ""


def size_to_sectors(size: str) -> int:
    """Convert a size token to a sector count (binary units, truncating).

    Raises a :class:`errors.SizeError` subclass when the token is not a
    usable size.
    """
    number_str, suffix = split_size(size.upper())
    if not number_str or not (number_str.isascii() and number_str.isdigit()):
        raise InvalidNumberError(number_str)
    number = int(number_str)
    if number > U64_MAX:
        raise InvalidNumberError(number_str)
    if number == 0:
        raise ZeroSizeError()
    multiplier = SIZE_MULTIPLIERS.get(suffix)
    if multiplier is None:
        raise UnknownSuffixError(suffix)
    total = number * multiplier
    if total > U64_MAX:
        raise SizeOverflowError()
    sectors = total // SECTOR_SIZE
    if sectors == 0:
        raise BelowMinimumError()
    return sectors
