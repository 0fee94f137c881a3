#!/usr/bin/env python3
# -*- coding: utf-8 -*-
import logging
import subprocess
from typing import List

from .base import RamDiskBackend, StorageError

logger = logging.getLogger("mkramdisk")


def _run(cmd: List[str]) -> subprocess.CompletedProcess:
    """Run a macOS disk tool, turning a missing executable into StorageError."""
    logger.debug("exec: %s", " ".join(cmd))
    try:
        return subprocess.run(cmd, capture_output=True, text=True, check=False)
    except OSError as e:
        raise StorageError(f"Failed to execute {cmd[0]}: {e}") from e


def _stderr_text(result: subprocess.CompletedProcess) -> str:
    return (result.stderr or "").strip() or f"exit status {result.returncode}"


class HdiutilBackend(RamDiskBackend):
    """RAM disks through `hdiutil attach ram://` and `diskutil erasevolume`."""

    def __init__(self, verbose: bool = False):
        self.verbose = verbose

    def attach(self, sectors: int) -> str:
        result = _run(["hdiutil", "attach", "-nomount", f"ram://{sectors}"])
        if result.returncode != 0:
            raise StorageError(_stderr_text(result))
        fields = (result.stdout or "").split()
        device = fields[0] if fields else ""
        if not device:
            raise StorageError("No device returned by hdiutil")
        if not device.startswith("/dev/"):
            raise StorageError(f"Unexpected device returned by hdiutil: {device}")
        return device

    def erase_volume(self, label: str, name: str, device: str) -> None:
        result = _run(["diskutil", "erasevolume", label, name, device])
        if self.verbose:
            for line in (result.stdout or "").splitlines():
                logger.info("diskutil: %s", line)
            for line in (result.stderr or "").splitlines():
                logger.info("diskutil: %s", line)
        if result.returncode != 0:
            if self.verbose:
                raise StorageError("Check verbose output above for details")
            raise StorageError(_stderr_text(result))

    def detach(self, device: str) -> None:
        result = _run(["hdiutil", "detach", device])
        if result.returncode != 0:
            raise StorageError(f"Failed to detach {device}: {_stderr_text(result)}")
