"""Opening files with combinable read, write, create and append flags."""

import os
from enum import IntEnum, IntFlag
from typing import BinaryIO, Union


class OpenFlags(IntFlag):
    """How a file is opened."""

    W = 0b00001  # write
    R = 0b00010  # read
    C = 0b00100  # create, keep contents
    D = 0b01000  # create, destroy contents
    A = 0b10000  # append
    RW = 0b00011
    RWC = 0b00111
    RWD = 0b01011


class FailureCode(IntEnum):
    """Why :func:`file_open` failed."""

    NONE = 0
    PLATFORM = 1
    INVALID_FLAGS = 2


class FileOpenError(OSError):
    """Raised when a file cannot be opened.

    ``failure_code`` is a :class:`FailureCode`; ``system_code`` is the
    operating system's error number for platform failures, otherwise 0.
    """

    def __init__(self, failure_code: FailureCode, system_code: int, message: str) -> None:
        super().__init__(system_code or None, message)
        self.failure_code = FailureCode(failure_code)
        self.system_code = system_code


def _invalid(message: str) -> FileOpenError:
    return FileOpenError(FailureCode.INVALID_FLAGS, 0, message)


def file_open(path: Union[str, os.PathLike], flags: OpenFlags) -> BinaryIO:
    """Open ``path`` according to ``flags`` and return a binary file object.

    C and D are mutually exclusive, as are W and A. A creates the file if
    needed and writes only at the end. Without C, D or A the file must exist.
    """
    flags = OpenFlags(flags)
    if OpenFlags.C in flags and OpenFlags.D in flags:
        raise _invalid("create-and-keep and create-and-destroy cannot be combined")
    if OpenFlags.A in flags and OpenFlags.W in flags:
        raise _invalid("writing and appending cannot be combined")

    read = OpenFlags.R in flags
    write = OpenFlags.W in flags
    append = OpenFlags.A in flags
    if not (read or write or append):
        raise _invalid("no read, write or append access requested")

    if read and (write or append):
        os_flags = os.O_RDWR
    elif read:
        os_flags = os.O_RDONLY
    else:
        os_flags = os.O_WRONLY

    if append:
        os_flags |= os.O_CREAT | os.O_APPEND
    elif OpenFlags.D in flags:
        os_flags |= os.O_CREAT | os.O_TRUNC
    elif OpenFlags.C in flags:
        os_flags |= os.O_CREAT
    os_flags |= getattr(os, "O_BINARY", 0)

    if append:
        mode = "a+b" if read else "ab"
    elif write:
        mode = "r+b" if read else "wb"
    else:
        mode = "rb"

    try:
        fd = os.open(os.fspath(path), os_flags, 0o666)
    except OSError as exc:
        raise FileOpenError(FailureCode.PLATFORM, exc.errno or 0, str(exc)) from exc
    try:
        return os.fdopen(fd, mode)
    except Exception:
        os.close(fd)
        raise