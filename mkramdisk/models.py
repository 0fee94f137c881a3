#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Data models for mkramdisk.
This module contains the data classes used throughout the application.
"""
import dataclasses
from pathlib import Path

from pydantic import BaseModel, computed_field

SECTOR_SIZE = 512
DEFAULT_NAME = "RAMDisk"
DEFAULT_FILESYSTEM = "apfs"
DEFAULT_VOLUMES_ROOT = "/Volumes"


@dataclasses.dataclass(frozen=True)
class RamDiskConfig:
    """Validated request for a single RAM disk.

    ``name`` is already sanitized and ``filesystem`` already known to be a
    supported alias; build instances through
    :func:`mkramdisk.utils.validation.build_config`.
    """

    size: str
    name: str = DEFAULT_NAME
    filesystem: str = DEFAULT_FILESYSTEM
    verbose: bool = False


@dataclasses.dataclass(frozen=True)
class MountWait:
    """Polling budget for the mount point to appear."""

    attempts: int = 50
    interval: float = 0.1

    @property
    def timeout(self) -> float:
        return self.attempts * self.interval


class ProvisionReport(BaseModel):
    """Success record handed back to the caller once the volume is mounted."""

    device: str
    size: str
    sectors: int
    filesystem: str
    filesystem_label: str
    mount_point: Path
    name: str

    @computed_field
    @property
    def bytes(self) -> int:
        return self.sectors * SECTOR_SIZE

    @computed_field
    @property
    def unmount_command(self) -> str:
        return f'diskutil unmount "{self.mount_point}"'

    @computed_field
    @property
    def detach_command(self) -> str:
        return f"hdiutil detach {self.device}"
