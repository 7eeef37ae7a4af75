import io

import pytest

from os2lx.config import (
    NUM_DISKS,
    SYSTEM_CONFIG,
    Settings,
    config_paths,
    load_settings,
    parse_bool,
    parse_float,
)


@pytest.mark.parametrize("word", ["1", "yes", "Y", "TRUE", "t", "On"])
def test_parse_bool_true(word):
    assert parse_bool(word) is True


@pytest.mark.parametrize("word", ["0", "no", "N", "False", "F", "OFF"])
def test_parse_bool_false(word):
    assert parse_bool(word) is False


def test_parse_bool_rejects_other_words():
    with pytest.raises(ValueError, match="Try 1 or 0"):
        parse_bool("maybe")


def test_parse_float_values():
    assert parse_float("0.5") == 0.5
    assert parse_float("0.25xyz") == 0.25
    assert parse_float("abc") == 0.0


def test_parse_float_overflow():
    with pytest.raises(ValueError, match="Try a number"):
        parse_float("1e50")


def test_defaults():
    settings = Settings()
    assert settings.trace_native is False
    assert settings.trace_events is False
    assert settings.beep_volume == parse_float("0.05")
    assert settings.disks == [None] * NUM_DISKS


def test_system_settings():
    settings = Settings()
    settings.load_lines(
        ["system.trace_native = yes\n", "  system.trace_events=1\n", "system.beep_volume =0.5\n"]
    )
    assert settings.trace_native is True
    assert settings.trace_events is True
    assert settings.beep_volume == 0.5
    assert settings.warnings == []


def test_comments_and_blank_lines_are_skipped():
    settings = Settings()
    settings.load_lines(["\n", "   \n", "; x\n", "# y\n", "// z\n"])
    assert settings.warnings == []
    assert settings == Settings()


@pytest.mark.parametrize(
    "line",
    ["system trace_native = 1", "system.trace_native 1", "system.trace_native:1", ".x=1", "system.=1"],
)
def test_invalid_lines_warn(line):
    settings = Settings()
    settings.load_lines([line], "cfg")
    assert settings.warnings == ["[cfg:1] Invalid configuration line"]


def test_warnings_count_lines_and_go_to_err():
    err = io.StringIO()
    settings = Settings(err=err)
    settings.load_lines(["# fine\n", "bogus.thing=1\n"], "my.cfg")
    assert settings.warnings == ['[my.cfg:2] Unknown category "bogus"']
    assert '[my.cfg:2] Unknown category "bogus"' in err.getvalue()


def test_unknown_system_variable():
    settings = Settings()
    settings.load_lines(["system.volume=1"], "c")
    assert settings.warnings == ["[c:1] Unknown variable system.volume"]


def test_bad_bool_keeps_previous_value():
    settings = Settings()
    settings.load_lines(["system.trace_native=1", "system.trace_native=perhaps"], "c")
    assert settings.trace_native is True
    assert len(settings.warnings) == 1
    assert "perhaps" in settings.warnings[0]


def test_mount_point(tmp_path):
    settings = Settings()
    settings.load_lines([f"mountpoint.c = {tmp_path}"])
    assert settings.disks[2] == f"{tmp_path}/"
    assert settings.warnings == []


def test_mount_point_keeps_existing_slash(tmp_path):
    settings = Settings()
    settings.load_lines([f"mountpoint.D={tmp_path}/"])
    assert settings.disks[3] == f"{tmp_path}/"


def test_mount_point_empty_value_unmounts(tmp_path):
    settings = Settings()
    settings.load_lines([f"mountpoint.E={tmp_path}", "mountpoint.E="])
    assert settings.disks[4] is None
    assert settings.warnings == []


def test_mount_point_missing_path(tmp_path):
    settings = Settings()
    missing = tmp_path / "nope"
    settings.load_lines([f"mountpoint.C={missing}"])
    assert settings.disks[2] is None
    assert "isn't accessible" in settings.warnings[0]


def test_mount_point_not_a_directory(tmp_path):
    target = tmp_path / "file.txt"
    target.write_text("x")
    settings = Settings()
    settings.load_lines([f"mountpoint.C={target}"])
    assert settings.disks[2] is None
    assert "isn't a directory" in settings.warnings[0]


def test_mount_point_invalid_disk(tmp_path):
    settings = Settings()
    settings.load_lines([f"mountpoint.CD={tmp_path}"], "c")
    assert settings.disks == [None] * NUM_DISKS
    assert settings.warnings == ["[c:1] Invalid disk \"CD\" (must be between 'A' and 'Z')"]


def test_load_file_and_missing_file(tmp_path):
    cfg = tmp_path / "a.cfg"
    cfg.write_text("system.trace_events = on\r\n")
    settings = Settings()
    settings.load(cfg)
    settings.load(tmp_path / "missing.cfg")
    assert settings.trace_events is True
    assert settings.warnings == []


def test_config_paths():
    assert config_paths({"XDG_CONFIG_HOME": "/x", "HOME": "/h"}) == [
        SYSTEM_CONFIG,
        "/x/2ine/2ine.cfg",
    ]
    assert config_paths({"HOME": "/h"}) == [SYSTEM_CONFIG, "/h/.config/2ine/2ine.cfg"]
    assert config_paths({}) == [SYSTEM_CONFIG]


def test_load_settings_reads_user_file(tmp_path):
    cfg_dir = tmp_path / "2ine"
    cfg_dir.mkdir()
    (cfg_dir / "2ine.cfg").write_text("system.beep_volume=0.75\n")
    settings = load_settings({"XDG_CONFIG_HOME": str(tmp_path)})
    assert settings.beep_volume == 0.75