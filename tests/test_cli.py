import io
import struct

from os2lx.cli import dump_executable, main
from os2lx.headers import NeHeader


def build_ne(tables=b"\0\0\0\0", **fields):
    stub = bytearray(0x40)
    stub[0:2] = b"MZ"
    struct.pack_into("<I", stub, 0x3C, 0x40)
    header = NeHeader(magic_n=ord("N"), magic_e=ord("E"), exe_type=1, **fields).to_bytes()
    return bytes(stub) + header + tables


def test_dump_executable_rejects_non_os2():
    out, err = io.StringIO(), io.StringIO()
    assert dump_executable("x.exe", b"MZ" + bytes(100), out, err) is False
    assert out.getvalue() == "x.exe\n"
    assert "not an OS/2 EXE" in err.getvalue()


def test_dump_executable_ne():
    out, err = io.StringIO(), io.StringIO()
    assert dump_executable("prog.exe", build_ne(), out, err) is True
    assert out.getvalue().startswith("prog.exe\nNE (16-bit) executable.\n")
    assert err.getvalue() == ""


def test_main_usage(capsys):
    assert main([]) == 1
    assert "USAGE:" in capsys.readouterr().err


def test_main_missing_file(tmp_path, capsys):
    missing = tmp_path / "missing.exe"
    assert main([str(missing)]) == 2
    assert "can't open" in capsys.readouterr().err


def test_main_dumps_file(tmp_path, capsys):
    path = tmp_path / "prog.exe"
    path.write_bytes(build_ne())
    assert main([str(path)]) == 0
    captured = capsys.readouterr()
    assert captured.out.splitlines()[:2] == [str(path), "NE (16-bit) executable."]


def test_main_not_os2_still_succeeds(tmp_path, capsys):
    path = tmp_path / "text.exe"
    path.write_bytes(b"hello world\n")
    assert main([str(path)]) == 0
    assert "not an OS/2 EXE" in capsys.readouterr().err


def test_main_truncated_table_fails(tmp_path, capsys):
    path = tmp_path / "bad.exe"
    path.write_bytes(build_ne(num_module_ref_table_entries=1, module_reference_table_offset=5000))
    assert main([str(path)]) == 1
    assert "truncated" in capsys.readouterr().err