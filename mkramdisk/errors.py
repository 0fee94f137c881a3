#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Error taxonomy for mkramdisk.
Every failure a run can end in is one of these exceptions; the message is
meant to be shown to the user as-is.
"""
from pathlib import Path
from typing import Optional, Sequence


class RamDiskError(Exception):
    """Base class for all user-facing mkramdisk failures."""

    pass


class ConfigError(RamDiskError):
    """Configuration file could not be read or does not match the schema."""

    pass


class SizeError(RamDiskError):
    """Size token could not be turned into a sector count."""

    pass


class InvalidNumberError(SizeError):
    def __init__(self, number: str):
        super().__init__(f"Invalid number in size: {number}")
        self.number = number


class ZeroSizeError(SizeError):
    def __init__(self):
        super().__init__("Size cannot be zero")


class UnknownSuffixError(SizeError):
    def __init__(self, suffix: str):
        super().__init__(f"Unknown size suffix: {suffix}")
        self.suffix = suffix


class SizeOverflowError(SizeError):
    def __init__(self):
        super().__init__("Size too large")


class BelowMinimumError(SizeError):
    def __init__(self):
        super().__init__("Size too small (minimum 512 bytes)")


class UnsupportedFilesystemError(RamDiskError):
    """Filesystem token is not one of the supported aliases."""

    def __init__(self, token: str, supported: Sequence[str]):
        super().__init__(f"Unsupported filesystem: {token} (supported filesystems: {', '.join(supported)})")
        self.token = token
        self.supported = tuple(supported)


class AlreadyExistsError(RamDiskError):
    def __init__(self, name: str, mount_point: Path):
        super().__init__(f"Volume '{name}' already exists at {mount_point}")
        self.name = name
        self.mount_point = mount_point


class AllocationFailedError(RamDiskError):
    def __init__(self, detail: str):
        super().__init__(f"Failed to create RAM disk: {detail}")
        self.detail = detail


class FormatFailedError(RamDiskError):
    def __init__(self, device: str, detail: str):
        super().__init__(f"Failed to format RAM disk: {detail}")
        self.device = device
        self.detail = detail


class MountTimeoutError(RamDiskError):
    def __init__(self, device: str, mount_point: Path, timeout: Optional[float] = None):
        waited = f" within {timeout:.1f}s" if timeout is not None else ""
        super().__init__(f"RAM disk was formatted but {mount_point} did not appear{waited}")
        self.device = device
        self.mount_point = mount_point


class VerificationFailedError(RamDiskError):
    def __init__(self, device: str, mount_point: Path):
        super().__init__(f"RAM disk creation completed but verification of {mount_point} failed")
        self.device = device
        self.mount_point = mount_point
