#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Filesystem utilities module for mkramdisk.
This module contains mount point helpers and the bounded mount poll.
"""
import logging
import time
from pathlib import Path
from typing import Callable, Union

from mkramdisk.models import DEFAULT_VOLUMES_ROOT

logger = logging.getLogger("mkramdisk")

PathExists = Callable[[Path], bool]


def path_exists(path: Path) -> bool:
    """Return True if anything (file, directory, mount) exists at `path`."""
    return path.exists()


def mount_point_for(name: str, volumes_root: Union[str, Path] = DEFAULT_VOLUMES_ROOT) -> Path:
    """Return the path where macOS mounts a volume called `name`."""
    return Path(volumes_root) / name


def wait_for_mount(
    mount_point: Path,
    attempts: int = 50,
    interval: float = 0.1,
    exists: PathExists = path_exists,
    sleep: Callable[[float], None] = time.sleep,
) -> bool:
    """Poll for `mount_point` up to `attempts` times, `interval` seconds apart.

    Returns True on first detection, False once the budget is spent.
    """
    for attempt in range(max(1, attempts)):
        if exists(mount_point):
            logger.debug("Mount point %s present after %d attempt(s)", mount_point, attempt + 1)
            return True
        sleep(interval)
    return False
