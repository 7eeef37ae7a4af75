import os
from pathlib import Path

import pytest

from os2lx.drives import NUM_DISKS, prepare_drives


@pytest.fixture
def base(tmp_path):
    return Path(os.path.realpath(tmp_path))


def _disks(**letters):
    slots = [None] * NUM_DISKS
    for letter, path in letters.items():
        slots[ord(letter) - ord("A")] = path
    return slots


def test_no_disks_maps_root_to_c(base):
    table = prepare_drives([None] * NUM_DISKS, base)
    assert table.disks[2] == "/"
    assert table.current_dir[2] == str(base)[1:].replace("/", "\\")
    assert table.current_letter == "C"
    assert table.diskmap == 0


def test_cwd_under_mount(base):
    work = base / "sub" / "dir"
    work.mkdir(parents=True)
    table = prepare_drives(_disks(C=f"{base}/"), work)
    assert table.current_dir[2] == "sub\\dir"
    assert table.current_letter == "C"
    assert table.diskmap == 1 << 2
    assert table.mount_point("c") == f"{base}/"
    assert table.warnings == []


def test_cwd_at_mount_root(base):
    table = prepare_drives(_disks(D=str(base)), base)
    assert table.current_dir[3] == ""
    assert table.current_letter == "D"


def test_cwd_outside_mounts_picks_lowest_from_c(base):
    a = base / "a"
    d = base / "d"
    other = base / "other"
    for p in (a, d, other):
        p.mkdir()
    table = prepare_drives(_disks(A=str(a), D=str(d)), other)
    assert table.current_letter == "D"
    assert table.current_dir[0] == ""
    assert table.current_dir[3] == ""
    assert table.diskmap == (1 << 0) | (1 << 3)


def test_only_floppy_drive(base):
    a = base / "a"
    other = base / "other"
    a.mkdir()
    other.mkdir()
    table = prepare_drives(_disks(A=str(a)), other)
    assert table.current_letter == "A"


def test_prefix_is_not_enough(base):
    ab = base / "ab"
    abc = base / "abc"
    ab.mkdir()
    abc.mkdir()
    table = prepare_drives(_disks(E=str(ab)), abc)
    assert table.current_dir[4] == ""
    assert table.current_letter == "E"


def test_unresolvable_disk_is_dropped(base):
    missing = base / "gone"
    table = prepare_drives(_disks(C=str(missing)), base)
    assert table.disks[2] == "/"
    assert table.diskmap == 0
    assert len(table.warnings) == 1
    assert "not mounting C:\\" in table.warnings[0]


def test_disk_paths_are_kept_as_configured(base):
    table = prepare_drives(_disks(F=f"{base}/"), base)
    assert table.disks[5] == f"{base}/"
    assert all(table.disks[i] is None for i in range(NUM_DISKS) if i != 5)


def test_too_many_disks():
    with pytest.raises(ValueError):
        prepare_drives([None] * (NUM_DISKS + 1), "/")


def test_invalid_letter(base):
    table = prepare_drives([], base)
    with pytest.raises(ValueError):
        table.mount_point("1")