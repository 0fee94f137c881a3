import logging
from pathlib import Path
from typing import List, Optional, Tuple

import pytest

from mkramdisk.backend.storage import StorageError


class FakeBackend:
    """In-memory RAM disk backend; erase_volume "mounts" by creating the directory."""

    def __init__(
        self,
        volumes_root: Path,
        device: str = "/dev/disk9",
        attach_error: Optional[str] = None,
        erase_error: Optional[str] = None,
        detach_error: Optional[str] = None,
        mounts: bool = True,
    ):
        self.volumes_root = volumes_root
        self.device = device
        self.attach_error = attach_error
        self.erase_error = erase_error
        self.detach_error = detach_error
        self.mounts = mounts
        self.attached: List[int] = []
        self.erased: List[Tuple[str, str, str]] = []
        self.detached: List[str] = []

    def attach(self, sectors: int) -> str:
        self.attached.append(sectors)
        if self.attach_error:
            raise StorageError(self.attach_error)
        return self.device

    def erase_volume(self, label: str, name: str, device: str) -> None:
        self.erased.append((label, name, device))
        if self.erase_error:
            raise StorageError(self.erase_error)
        if self.mounts:
            (self.volumes_root / name).mkdir(parents=True)

    def detach(self, device: str) -> None:
        self.detached.append(device)
        if self.detach_error:
            raise StorageError(self.detach_error)


@pytest.fixture
def volumes_root(tmp_path):
    root = tmp_path / "Volumes"
    root.mkdir()
    return root


@pytest.fixture
def fake_backend(volumes_root):
    return FakeBackend(volumes_root)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    monkeypatch.setenv("MKRAMDISK_CONFIG", str(tmp_path / "missing-config.json"))
    monkeypatch.delenv("MKRAMDISK_VOLUMES_ROOT", raising=False)


@pytest.fixture(autouse=True)
def reset_logger():
    logger = logging.getLogger("mkramdisk")
    level = logger.level
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(level)
