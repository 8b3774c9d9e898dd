"""Operating-system services: platform detection, sleeping, clocks, commands and exit."""

import mmap
import subprocess
import sys
import time
from enum import IntEnum
from typing import Optional


class OSKind(IntEnum):
    """The operating systems told apart by :func:`current_os`."""

    UNKNOWN = 0
    WIN = 1
    LINUX = 2
    MACOS = 3
    SOLARIS = 4


def current_os() -> OSKind:
    """Return the operating system the interpreter is running on."""
    platform = sys.platform
    if platform.startswith(("win", "cygwin")):
        return OSKind.WIN
    if platform.startswith("linux"):
        return OSKind.LINUX
    if platform == "darwin":
        return OSKind.MACOS
    if platform.startswith("sunos"):
        return OSKind.SOLARIS
    return OSKind.UNKNOWN


def _check_duration(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def sleep_us(us: int) -> None:
    """Sleep for ``us`` microseconds."""
    _check_duration("us", us)
    time.sleep(us / 1_000_000)


def sleep_ms(ms: int) -> None:
    """Sleep for ``ms`` milliseconds."""
    _check_duration("ms", ms)
    sleep_us(ms * 1000)


def sleep_s(s: int) -> None:
    """Sleep for ``s`` seconds."""
    _check_duration("s", s)
    sleep_ms(s * 1000)


def get_time_us() -> int:
    """Monotonic high-resolution clock in whole microseconds."""
    return time.perf_counter_ns() // 1000


def get_time_ms() -> int:
    """Monotonic clock in whole milliseconds."""
    return get_time_us() // 1000


def get_time_s() -> int:
    """Monotonic clock in whole seconds."""
    return get_time_us() // 1000 // 1000


def get_time_sf64() -> float:
    """Monotonic clock in seconds as a float."""
    return get_time_us() / 1000.0 / 1000.0


def run_command(command: Optional[str]) -> bool:
    """Run ``command`` through the system shell and wait for it to finish.

    Returns True if the process could be started, False otherwise. The
    command's own exit status does not affect the result.
    """
    if command is None:
        return False
    if current_os() is OSKind.WIN:
        argv = ["cmd", "/c", command]
    else:
        argv = ["/bin/sh", "-c", command]
    try:
        subprocess.run(argv, check=False)
    except OSError:
        return False
    return True


def sys_exit(code: int) -> None:
    """Terminate the process with exit status ``code``."""
    sys.exit(code)


def get_page_size() -> int:
    """The size of a memory page in bytes."""
    return mmap.PAGESIZE