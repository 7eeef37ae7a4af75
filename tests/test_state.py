import threading

import pytest

from os2lx.state import LoaderState, create_loader_state


def test_init_tib_fields():
    tib = LoaderState().init_tib(0x10000, 0x4000, 7)
    assert tib.tid == 7
    assert tib.stack_limit == 0x10000
    assert tib.stack_base == 0x10000 - 0x4000
    assert (tib.version, tib.ordinal, tib.priority, tib.tib2_version) == (20, 79, 512, 20)
    assert tib.exception_chain is None
    assert tib.mc_count == 0 and tib.mc_force_flag == 0


def test_set_and_get_tib():
    state = LoaderState()
    tib = state.init_tib(100, 50, 1)
    assert state.set_tib(tib) == 1
    assert state.get_tib() is tib


def test_tib_is_per_thread():
    state = LoaderState()
    main_tib = state.init_tib(100, 50, 1)
    state.set_tib(main_tib)
    results = {}

    def worker():
        results["before"] = state.get_tib()
        state.set_tib(state.init_tib(200, 50, 2))
        results["after"] = state.get_tib()

    thread = threading.Thread(target=worker)
    thread.start()
    thread.join()
    assert results["before"] is None
    assert results["after"].tid == 2
    assert state.get_tib() is main_tib
    assert state.get_tib().tid == 1


def test_deinit_tib_clears():
    state = LoaderState()
    state.set_tib(state.init_tib(100, 50, 1))
    state.deinit_tib(1)
    assert state.get_tib() is None


def test_make_unix_path_is_identity():
    assert LoaderState().make_unix_path("/some/path") == "/some/path"


def test_sixteen_bit_support_fails():
    state = LoaderState()
    assert state.find_selector(0x1234, True) is None
    assert state.alloc_segment(False) is None


def test_terminate_exits_with_code():
    with pytest.raises(SystemExit) as info:
        LoaderState().terminate(3)
    assert info.value.code == 3


def test_create_loader_state_reads_user_config(tmp_path):
    drive = tmp_path / "d"
    (drive / "sub").mkdir(parents=True)
    cfgdir = tmp_path / "cfg" / "2ine"
    cfgdir.mkdir(parents=True)
    (cfgdir / "2ine.cfg").write_text(
        f"system.trace_events = yes\nmountpoint.d = {drive}\n"
    )
    env = {"XDG_CONFIG_HOME": str(tmp_path / "cfg"), "LIBPATH": "/lib"}
    state = create_loader_state(env, b"prog\0arg\0", drive / "sub")
    assert state.trace_events is True
    assert state.drives.current_letter == "D"
    assert state.drives.current_dir[3] == "sub"
    assert state.pib.exe_name == "prog"
    assert state.libpath == "/lib"
    assert state.get_tib() is state.main_tib
    assert state.main_tib_selector == 1


def test_environment_overrides_and_subprocess(tmp_path):
    env = {
        "XDG_CONFIG_HOME": str(tmp_path),
        "TRACE_NATIVE": "",
        "IS_2INE": "1",
        "PATH": "/usr/bin",
    }
    state = create_loader_state(env, b"prog\0", tmp_path)
    assert state.trace_native is True
    assert state.subprocess is True
    assert "PATH=/usr/bin" in state.pib.environment.split("\0")


def test_shutdown_releases(tmp_path):
    state = create_loader_state({"XDG_CONFIG_HOME": str(tmp_path)}, b"prog\0", tmp_path)
    state.audio.register(lambda s, f: True)
    state.shutdown()
    assert len(state.audio) == 0
    assert state.pib is None
    assert state.get_tib() is None