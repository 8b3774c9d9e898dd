"""Command that opens a file, writes markers to it and reports what happened."""

import os
import sys
from typing import List, Optional

from .fileio import FileOpenError, OpenFlags, file_open
from .put import put_fn

DEFAULT_PATH = "testxyz.txt"


def main(argv: Optional[List[str]] = None) -> int:
    """Open the file (default ``testxyz.txt``), write ``------`` at its start and ``//`` at its end.

    Prints the open status, failure code, system failure code and the file
    size before the final write. Returns 0 on success, 1 if the file cannot
    be opened.
    """
    args = sys.argv[1:] if argv is None else list(argv)
    path = args[0] if args else DEFAULT_PATH

    try:
        handle = file_open(path, OpenFlags.RWC)
    except FileOpenError as exc:
        put_fn("{0}", 0)
        put_fn("{0}", int(exc.failure_code))
        put_fn("{0}", exc.system_code)
        return 1

    with handle:
        put_fn("{0}", 1)
        put_fn("{0}", 0)
        put_fn("{0}", 0)
        handle.write(b"------")
        end = handle.seek(0, os.SEEK_END)
        put_fn("{0}", end)
        handle.write(b"//")
    return 0


if __name__ == "__main__":
    sys.exit(main())