# poser

A small toolkit of text and system helpers.

## Modules

- `poser.fstr` — `FStr`, a mutable string whose methods edit it in place:
  `append`, `append_chr`, `insert`, `remove`, `remove_chr`, `remove_chrs`,
  `remove_at`, `replace`, `replace_chr`, `set_chr`, `terminate`, `overwrite`,
  `pad`, `trim`, `to_lower`, `to_upper`, `invert_case`, `reverse`, `clear`.
  It also searches (`index_of`, `index_of_chr`, `count`, `count_chr`,
  `starts_with`, `starts_with_chr`), slices (`substr`), copies, and renders
  itself (`as_c` for NUL-terminated UTF-8 bytes, `print`, `println`,
  `num_text`, `hex_text`, `bin_text`).
- `poser.search` — `index_of`, `count`, `remove_all`, `replace_all` and
  `starts_with` on plain `str`.
- `poser.edit` — `remove_at`, `overwrite`, `pad`, `trim`, `substr` and
  `insert` on plain `str`. Failures raise `FStrError`, whose `code` is a
  `StrError` value such as `StrError.INDEX_OUT_OF_BOUNDS`.
- `poser.chars` — ASCII case conversion (`to_lower`, `to_upper`,
  `invert_case` and their single-character forms) and `is_trim_char`.
- `poser.hstr` — `HStr`, a growable string with `append`, `append_i64`,
  `append_u64`, and the constructors `HStr.from_i64` / `HStr.from_u64`.
- `poser.numfmt` — `i64_to_str` and `u64_to_str`, which raise
  `OverflowError` for values outside the 64-bit ranges.
- `poser.cstr` — C-style `str_len` (length up to the first NUL) and
  `str_cmp` (difference of the first differing bytes, or 0).
- `poser.fmt` — `format_args` replaces `{0}`, `{1}` … with the text of the
  arguments (strings, `FStr`, `HStr` and 64-bit integers; at most 15
  arguments), `fmt_to_fstr` returns the result as an `FStr`, and `to_str`
  converts a single value. Unsupported values raise `FormatError`.
- `poser.put` — `put_s`, `put_sn`, `put_n`, `put_i64`, `put_i64n`,
  `put_u64`, `put_u64n`, `put_f`, `put_fn` write to standard output or to a
  given `stream`. `put_clr` clears the terminal (an ANSI sequence, or
  `cmd.exe /c cls` on Windows).
- `poser.fileio` — `file_open(path, flags)` with combinable `OpenFlags`
  (`R`, `W`, `C`, `D`, `A`, `RW`, `RWC`, `RWD`), returning a binary file
  object. Invalid combinations (`W` with `A`, `C` with `D`, or no access at
  all) and operating-system failures raise `FileOpenError`, which carries a
  `failure_code` (`FailureCode`) and a `system_code`.
- `poser.system` — `current_os` (an `OSKind`), `sleep_us` / `sleep_ms` /
  `sleep_s`, monotonic clocks `get_time_us` / `get_time_ms` / `get_time_s` /
  `get_time_sf64`, `run_command` (runs a shell command, returns whether it
  could be started), `sys_exit` and `get_page_size`.
- `poser.threads` — `Spinlock` (also a context manager), `Thread`, which
  runs `function(args)` at once and whose `join` returns the result or
  re-raises the function's exception, and `active_thread_count`.

## Installing

```
pip install .
```

## Examples

```python
from poser.fstr import FStr
from poser.fmt import format_args
from poser.put import put_fn

s = FStr("  Hello World  ")
s.trim(0)
s.replace("World", "There")
print(str(s))                                  # Hello There

print(format_args("{0} + {0} = {1}", 2, 4))    # 2 + 2 = 4
put_fn("{0}", 10)                              # writes "10\n" to standard output
```

```python
from poser.fileio import OpenFlags, file_open

with file_open("notes.txt", OpenFlags.RWC) as handle:
    handle.write(b"hello")
```

## Demo

```
poser-demo [PATH]
```

Opens `PATH` (default `testxyz.txt`) for reading and writing, creating it if
needed, writes `------` at its start and `//` at its end, and prints the
open status, the failure code, the system failure code and the file size
before the last write. It exits with 0 on success and 1 if the file cannot
be opened.

## What it does not do

There is no memory allocator or raw memory helpers here: strings and buffers
are ordinary Python objects. `FStr` works on characters; `as_c` is the only
way to get bytes out of it.

## Tests

```
pip install .[test]
pytest
```