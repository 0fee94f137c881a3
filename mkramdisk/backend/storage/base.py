#!/usr/bin/env python3
# -*- coding: utf-8 -*-
from __future__ import annotations

from typing import Protocol, runtime_checkable


class StorageError(Exception):
    """Generic storage backend error."""

    pass


@runtime_checkable
class RamDiskBackend(Protocol):
    """Minimal contract for RAM disk backends.
    Semantics:
      - attach(sectors): reserve `sectors` * 512 bytes of memory as a raw block device and
        return its handle (e.g., /dev/disk4). Nothing is mounted.
      - erase_volume(label, name, device): erase `device` with the canonical filesystem `label`,
        name the volume `name` and mount it.
      - detach(device): release the device back to the OS (best-effort; callers may ignore errors).
    Notes:
      - Raise StorageError for any failure of the underlying tools; other exceptions may propagate.
    """

    def attach(self, sectors: int) -> str:
        ...

    def erase_volume(self, label: str, name: str, device: str) -> None:
        ...

    def detach(self, device: str) -> None:
        ...
