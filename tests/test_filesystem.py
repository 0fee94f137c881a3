from pathlib import Path

from mkramdisk.utils import filesystem


def test_mount_point_for():
    assert filesystem.mount_point_for("TempDisk") == Path("/Volumes/TempDisk")
    assert filesystem.mount_point_for("Temp Disk", "/tmp/vols") == Path("/tmp/vols/Temp Disk")


def test_wait_for_mount_returns_on_first_detection():
    checks = []
    sleeps = []

    def fake_exists(path):
        checks.append(path)
        return len(checks) == 3

    assert filesystem.wait_for_mount(Path("/Volumes/X"), attempts=50, interval=0.1, exists=fake_exists, sleep=sleeps.append)
    assert len(checks) == 3
    assert sleeps == [0.1, 0.1]


def test_wait_for_mount_is_bounded():
    checks = []
    sleeps = []

    def never(path):
        checks.append(path)
        return False

    assert not filesystem.wait_for_mount(Path("/Volumes/X"), attempts=50, interval=0.1, exists=never, sleep=sleeps.append)
    assert len(checks) == 50
    assert len(sleeps) == 50
    assert abs(sum(sleeps) - 5.0) < 1e-9


def test_wait_for_mount_with_real_path(tmp_path):
    target = tmp_path / "vol"
    assert not filesystem.wait_for_mount(target, attempts=2, interval=0.0)
    target.mkdir()
    assert filesystem.wait_for_mount(target, attempts=2, interval=0.0)
    assert filesystem.path_exists(target)
