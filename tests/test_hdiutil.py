import logging
from types import SimpleNamespace

import pytest

from mkramdisk.backend.storage import HdiutilBackend, RamDiskBackend, StorageError, get_backend
from mkramdisk.backend.storage import hdiutil


def _recorder(monkeypatch, *results):
    calls = []
    queue = list(results)

    def fake_run(cmd, capture_output=True, text=True, check=False):
        calls.append(cmd)
        return queue.pop(0)

    monkeypatch.setattr(hdiutil.subprocess, "run", fake_run)
    return calls


def test_backend_satisfies_protocol():
    assert isinstance(HdiutilBackend(), RamDiskBackend)
    assert isinstance(get_backend(verbose=True), HdiutilBackend)
    assert get_backend(verbose=True).verbose is True


def test_attach_returns_trimmed_device(monkeypatch):
    calls = _recorder(monkeypatch, SimpleNamespace(returncode=0, stdout="/dev/disk4          \t\n", stderr=""))
    assert HdiutilBackend().attach(2097152) == "/dev/disk4"
    assert calls == [["hdiutil", "attach", "-nomount", "ram://2097152"]]


@pytest.mark.parametrize(
    "result,message",
    [
        (SimpleNamespace(returncode=1, stdout="", stderr="hdiutil: attach failed - Resource busy\n"), "Resource busy"),
        (SimpleNamespace(returncode=0, stdout="  \n", stderr=""), "No device returned"),
        (SimpleNamespace(returncode=0, stdout="garbage\n", stderr=""), "Unexpected device"),
    ],
)
def test_attach_failures(monkeypatch, result, message):
    _recorder(monkeypatch, result)
    with pytest.raises(StorageError) as excinfo:
        HdiutilBackend().attach(8)
    assert message in str(excinfo.value)


def test_missing_executable_is_storage_error(monkeypatch):
    def fake_run(cmd, **_kwargs):
        raise FileNotFoundError(2, "No such file or directory", cmd[0])

    monkeypatch.setattr(hdiutil.subprocess, "run", fake_run)
    with pytest.raises(StorageError) as excinfo:
        HdiutilBackend().attach(8)
    assert "Failed to execute hdiutil" in str(excinfo.value)


def test_erase_volume_command(monkeypatch):
    calls = _recorder(monkeypatch, SimpleNamespace(returncode=0, stdout="Finished erase\n", stderr=""))
    HdiutilBackend().erase_volume("MS-DOS FAT32", "Temp Disk", "/dev/disk4")
    assert calls == [["diskutil", "erasevolume", "MS-DOS FAT32", "Temp Disk", "/dev/disk4"]]


def test_erase_volume_failure_carries_stderr(monkeypatch):
    _recorder(monkeypatch, SimpleNamespace(returncode=1, stdout="", stderr="Error: -69888\n"))
    with pytest.raises(StorageError) as excinfo:
        HdiutilBackend().erase_volume("APFS", "X", "/dev/disk4")
    assert str(excinfo.value) == "Error: -69888"


def test_erase_volume_verbose_relays_output(monkeypatch, caplog):
    _recorder(monkeypatch, SimpleNamespace(returncode=1, stdout="Started erase\n", stderr="Error: -69888\n"))
    with caplog.at_level(logging.INFO, logger="mkramdisk"):
        with pytest.raises(StorageError) as excinfo:
            HdiutilBackend(verbose=True).erase_volume("APFS", "X", "/dev/disk4")
    assert "Check verbose output above" in str(excinfo.value)
    assert "diskutil: Started erase" in caplog.text
    assert "diskutil: Error: -69888" in caplog.text


def test_detach(monkeypatch):
    calls = _recorder(
        monkeypatch,
        SimpleNamespace(returncode=0, stdout='"disk4" ejected.\n', stderr=""),
        SimpleNamespace(returncode=1, stdout="", stderr="hdiutil: detach failed - No such file or directory\n"),
    )
    backend = HdiutilBackend()
    backend.detach("/dev/disk4")
    assert calls == [["hdiutil", "detach", "/dev/disk4"]]
    with pytest.raises(StorageError):
        backend.detach("/dev/disk4")
