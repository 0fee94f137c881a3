#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Storage backend implementations for mkramdisk.
This module provides the pluggable seam between the provisioner and the OS:
- RamDiskBackend, the capability contract (allocate, erase/mount, detach)
- HdiutilBackend, the macOS implementation on top of hdiutil and diskutil
"""
from .base import RamDiskBackend, StorageError
from .hdiutil import HdiutilBackend


def get_backend(verbose: bool = False) -> RamDiskBackend:
    """Return the RAM disk backend for this host."""
    return HdiutilBackend(verbose=verbose)


__all__ = [
    "StorageError",
    "RamDiskBackend",
    "HdiutilBackend",
    "get_backend",
]
