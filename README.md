# os2lx

Tools for reading OS/2 executables, and a model of the runtime state that an
OS/2 compatibility layer keeps on a Unix host.

## Dumping executables

`lx-dump` prints the contents of an OS/2 program. For an LX (32-bit) module
that means the header, the object table with its pages and fixup records, the
resource table, the entry table, module directives, imported modules, and the
resident and non-resident name tables. For an NE (16-bit) module it means the
header, the segment table with its fixup records, resources, the name tables,
the module reference table and the entry table.

    lx-dump program.exe

The command takes exactly one path.

- If it gets a different number of arguments, it prints a usage line and
  exits with status 1.
- If the file cannot be read, it exits with status 2.
- If the file is not an OS/2 executable, it prints the file name to standard
  output and the reason to standard error, and exits with status 0.
- If a table runs past the end of the file, or a fixup record cannot be
  decoded, it exits with status 1.

The same dump is available from Python:

```python
import sys
from os2lx.cli import dump_executable

with open("program.exe", "rb") as fh:
    dump_executable("program.exe", fh.read(), sys.stdout, sys.stderr)
```

`dump_executable` returns `False` when the data is not an OS/2 executable.

Lower-level building blocks:

- `os2lx.exe.load_executable(data)` and `os2lx.exe.read_executable(path)`
  validate the image and return an `Executable`. Its fields are `data`,
  `header_offset`, `kind` (an `ExeKind`) and `header`, and it also offers
  `is_lx` and `image`. Both functions raise `ExeFormatError` when the data is
  not a valid LX or NE image.
- `os2lx.lxdump.dump_lx` and `os2lx.nedump.dump_ne` write the two kinds of
  dump. `lx_module_flag_names`, `lx_object_flag_names`,
  `ne_module_flag_names` and `ne_segment_flag_names` turn flag words into
  names.
- `os2lx.headers` holds the packed little-endian records: `LxHeader`,
  `NeHeader`, `LxObjectTableEntry`, `LxObjectPageTableEntry`,
  `LxResourceTableEntry` and `NeSegmentTableEntry`. Each one has
  `from_bytes(data, offset)` and `to_bytes()`.

## Runtime state

- `os2lx.errors`: OS/2 return codes (`Os2Error`), hard-error codes
  (`I24Error`), the `Allowed`, `ErrorClass`, `ErrorAction`, `ErrorLocus` and
  `TerminationCode` enums, and `error_name(code)`.
- `os2lx.config`: reads `/etc/2ine.cfg` and then the user's file.
  - The user's file is `$XDG_CONFIG_HOME/2ine/2ine.cfg`, or
    `$HOME/.config/2ine/2ine.cfg` when `XDG_CONFIG_HOME` is unset.
  - Lines have the form `category.name = value`. The keys understood are
    `mountpoint.<letter>`, `system.trace_native`, `system.trace_events` and
    `system.beep_volume`.
  - Problems are collected in `Settings.warnings` and are not raised.
  - The module also has `parse_bool`, `parse_float`, `config_paths` and
    `load_settings`.
- `os2lx.drives`: `prepare_drives(disks, cwd)` resolves the mount points for
  drives A: through Z:. It returns a `DriveTable` with the current drive and
  the current directory on each drive. When nothing is mounted, the host root
  becomes C:.
- `os2lx.environment`: `process_info` builds the OS/2 environment block and
  command line.
  - By default it reads `/proc/self/cmdline`.
  - `IS_2INE` is left out of the block.
  - `PATH` is replaced by `OS2PATH` unless the process is a subprocess.
  - `LIBPATH` is kept separately.
  - The module also has `split_cmdline`, `build_command_line` and
    `build_environment_block`.
- `os2lx.audio`: `AudioMixer` mixes registered generator callables into one
  mono float stream (`register`, `render`, `clear`). It closes itself after a
  stretch of rendering with no generators.
- `os2lx.state`: `create_loader_state` combines the configuration, the drive
  table, the process information and the main thread's `ThreadInfoBlock` into
  a `LoaderState`. The `TRACE_NATIVE` and `TRACE_EVENTS` environment
  variables switch tracing on regardless of the configuration.

## What it does not do

- The package does not load or run OS/2 programs, and it implements none of
  the OS/2 API.
- `AudioMixer` produces sample lists only; it does not open a sound device.
- 16-bit segments and selectors are not supported:
  `LoaderState.find_selector` and `LoaderState.alloc_segment` always return
  `None`.
- In LX dumps, internal entry-table fixups raise `UnsupportedFixupError`, and
  the entries of forwarder bundles are not decoded.

## Installing

    pip install .
    pip install .[test]   # with pytest, to run the tests