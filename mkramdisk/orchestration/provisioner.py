#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Provisioning module for mkramdisk.
This module drives a RAM disk from a size token to a mounted, verified volume.

A run moves through the stages below in order; each stage handler returns
the next stage or raises a RamDiskError. Once a device has been attached,
any failure detaches it before the error propagates.

    PARSE -> PRECHECK -> ALLOCATE -> FORMAT -> AWAIT_MOUNT -> VERIFY -> SUCCESS
"""
import dataclasses
import enum
import logging
import time
from pathlib import Path
from typing import Callable, Dict, Optional, Union

from mkramdisk.backend.storage import RamDiskBackend, StorageError
from mkramdisk.errors import (
    AllocationFailedError,
    AlreadyExistsError,
    FormatFailedError,
    MountTimeoutError,
    VerificationFailedError,
)
from mkramdisk.models import DEFAULT_VOLUMES_ROOT, MountWait, ProvisionReport, RamDiskConfig
from mkramdisk.utils.filesystem import PathExists, mount_point_for, path_exists, wait_for_mount
from mkramdisk.utils.size import size_to_sectors
from mkramdisk.utils.validation import resolve_filesystem

logger = logging.getLogger("mkramdisk")


class Stage(enum.Enum):
    PARSE = "parse"
    PRECHECK = "precheck"
    ALLOCATE = "allocate"
    FORMAT = "format"
    AWAIT_MOUNT = "await-mount"
    VERIFY = "verify"
    SUCCESS = "success"


@dataclasses.dataclass
class ProvisionRun:
    """Mutable state of a single provisioning run."""

    config: RamDiskConfig
    stage: Stage = Stage.PARSE
    sectors: int = 0
    filesystem_label: str = ""
    mount_point: Optional[Path] = None
    device: Optional[str] = None


class RamDiskProvisioner:
    """Creates, formats and mounts one RAM disk per call to provision()."""

    def __init__(
        self,
        backend: RamDiskBackend,
        volumes_root: Union[str, Path] = DEFAULT_VOLUMES_ROOT,
        mount_wait: MountWait = MountWait(),
        exists: PathExists = path_exists,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.backend = backend
        self.volumes_root = Path(volumes_root)
        self.mount_wait = mount_wait
        self.exists = exists
        self.sleep = sleep
        self._handlers: Dict[Stage, Callable[[ProvisionRun], Stage]] = {
            Stage.PARSE: self._parse,
            Stage.PRECHECK: self._precheck,
            Stage.ALLOCATE: self._allocate,
            Stage.FORMAT: self._format,
            Stage.AWAIT_MOUNT: self._await_mount,
            Stage.VERIFY: self._verify,
        }

    def provision(self, config: RamDiskConfig) -> ProvisionReport:
        """Run every stage to completion and return the success report."""
        run = ProvisionRun(config=config)
        while run.stage is not Stage.SUCCESS:
            run.stage = self.advance(run)
        return ProvisionReport(
            device=run.device,
            size=config.size,
            sectors=run.sectors,
            filesystem=config.filesystem,
            filesystem_label=run.filesystem_label,
            mount_point=run.mount_point,
            name=config.name,
        )

    def advance(self, run: ProvisionRun) -> Stage:
        """Execute the handler for run.stage and return the stage that follows.

        If the handler fails after a device was attached, the device is
        detached before the exception is re-raised.
        """
        handler = self._handlers.get(run.stage)
        if handler is None:
            raise ValueError(f"No transition out of stage {run.stage.value}")
        try:
            return handler(run)
        except BaseException:
            if run.device is not None:
                self._cleanup(run.device)
            raise

    def _parse(self, run: ProvisionRun) -> Stage:
        config = run.config
        logger.info("Converting size '%s' to sectors...", config.size)
        run.sectors = size_to_sectors(config.size)
        resolve_filesystem(config.filesystem)
        logger.info("Size: %s = %d sectors", config.size, run.sectors)
        return Stage.PRECHECK

    def _precheck(self, run: ProvisionRun) -> Stage:
        run.mount_point = mount_point_for(run.config.name, self.volumes_root)
        logger.info("Checking that %s is free...", run.mount_point)
        if self.exists(run.mount_point):
            raise AlreadyExistsError(run.config.name, run.mount_point)
        return Stage.ALLOCATE

    def _allocate(self, run: ProvisionRun) -> Stage:
        logger.info("Creating RAM disk with %d sectors...", run.sectors)
        try:
            device = self.backend.attach(run.sectors)
        except StorageError as e:
            raise AllocationFailedError(str(e)) from e
        device = (device or "").strip()
        if not device:
            raise AllocationFailedError("No device handle returned")
        run.device = device
        logger.info("RAM disk device: %s", device)
        return Stage.FORMAT

    def _format(self, run: ProvisionRun) -> Stage:
        config = run.config
        run.filesystem_label = resolve_filesystem(config.filesystem)
        logger.info("Formatting RAM disk as %s with name '%s'...", config.filesystem, config.name)
        try:
            self.backend.erase_volume(run.filesystem_label, config.name, run.device)
        except StorageError as e:
            raise FormatFailedError(run.device, str(e)) from e
        return Stage.AWAIT_MOUNT

    def _await_mount(self, run: ProvisionRun) -> Stage:
        logger.info("Waiting for RAM disk to mount...")
        mounted = wait_for_mount(
            run.mount_point,
            attempts=self.mount_wait.attempts,
            interval=self.mount_wait.interval,
            exists=self.exists,
            sleep=self.sleep,
        )
        if not mounted:
            raise MountTimeoutError(run.device, run.mount_point, self.mount_wait.timeout)
        return Stage.VERIFY

    def _verify(self, run: ProvisionRun) -> Stage:
        logger.info("Verifying mount point %s...", run.mount_point)
        if not self.exists(run.mount_point):
            raise VerificationFailedError(run.device, run.mount_point)
        return Stage.SUCCESS

    def _cleanup(self, device: str) -> None:
        """Detach `device`, logging rather than raising on failure."""
        logger.info("Cleaning up device %s...", device)
        try:
            self.backend.detach(device)
        except Exception as e:
            logger.info("Cleanup of %s failed: %s", device, e)
