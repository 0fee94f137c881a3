#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Validation utilities for mkramdisk.
Filesystem alias resolution, volume name sanitizing and construction of the
validated request object.
"""
from typing import Dict, Tuple

import typer

from mkramdisk.errors import UnsupportedFilesystemError
from mkramdisk.models import DEFAULT_FILESYSTEM, DEFAULT_NAME, RamDiskConfig

# alias -> label expected by `diskutil erasevolume`
FILESYSTEM_LABELS: Dict[str, str] = {
    "apfs": "APFS",
    "hfs+": "HFS+",
    "hfs": "HFS+",
    "fat32": "MS-DOS FAT32",
    "msdos": "MS-DOS FAT32",
    "exfat": "ExFAT",
}
SUPPORTED_FILESYSTEMS: Tuple[str, ...] = ("apfs", "hfs+", "fat32", "exfat")

_NAME_PUNCTUATION = frozenset("_- ")


def fail(msg: str) -> None:
    """Print a single error line on stderr and exit with code 1."""
    typer.echo(f"Error: {msg}", err=True)
    raise typer.Exit(code=1)


def resolve_filesystem(filesystem: str) -> str:
    """Map a case-insensitive filesystem alias to its canonical label."""
    label = FILESYSTEM_LABELS.get(filesystem.lower())
    if label is None:
        raise UnsupportedFilesystemError(filesystem, SUPPORTED_FILESYSTEMS)
    return label


def validate_filesystem(filesystem: str) -> None:
    """Raise UnsupportedFilesystemError unless `filesystem` is a known alias."""
    resolve_filesystem(filesystem)


def sanitize_volume_name(name: str) -> str:
    """Keep only alphanumerics, space, '-' and '_', then trim surrounding whitespace."""
    kept = "".join(c for c in name if c.isalnum() or c in _NAME_PUNCTUATION)
    return kept.strip()


def build_config(
    size: str,
    name: str = DEFAULT_NAME,
    filesystem: str = DEFAULT_FILESYSTEM,
    verbose: bool = False,
) -> RamDiskConfig:
    """Validate raw user input and return an immutable RamDiskConfig.

    The filesystem is checked here so an unsupported value fails before any
    device is touched.
    """
    if not size or not size.strip():
        raise ValueError("Size argument is required")
    validate_filesystem(filesystem)
    return RamDiskConfig(
        size=size,
        name=sanitize_volume_name(name),
        filesystem=filesystem,
        verbose=verbose,
    )
