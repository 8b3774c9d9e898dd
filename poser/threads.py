"""A spinlock and a thread wrapper that tracks completion and its result."""

import threading
from typing import Any, Callable, Optional

_active_count = 0
_count_lock = threading.Lock()


def _adjust_active(delta: int) -> None:
    global _active_count
    with _count_lock:
        _active_count += delta


def active_thread_count() -> int:
    """Number of :class:`Thread` functions currently running."""
    with _count_lock:
        return _active_count


class Spinlock:
    """A busy-waiting lock; usable as a context manager."""

    def __init__(self) -> None:
        self._lock = threading.Lock()

    def is_locked(self) -> bool:
        """True while the lock is held."""
        return self._lock.locked()

    def lock(self) -> None:
        """Spin until the lock is free, then take it."""
        while not self._lock.acquire(blocking=False):
            pass

    def unlock(self) -> None:
        """Release the lock; releasing a free lock does nothing."""
        try:
            self._lock.release()
        except RuntimeError:
            pass

    def __enter__(self) -> "Spinlock":
        self.lock()
        return self

    def __exit__(self, *args: Any) -> None:
        self.unlock()


class Thread:
    """Runs ``function(args)`` on a new thread as soon as it is created."""

    def __init__(self, function: Callable[[Any], Any], args: Any = None) -> None:
        self.function = function
        self.result: Any = None
        self.completed = False
        self._error: Optional[BaseException] = None
        self._thread = threading.Thread(target=self._run, args=(args,), daemon=True)
        self._thread.start()
        self.id = self._thread.ident

    def _run(self, args: Any) -> None:
        _adjust_active(1)
        try:
            value = self.function(args)
            if value is not None:
                self.result = value
        except BaseException as exc:  # handed back to the joining thread
            self._error = exc
        finally:
            _adjust_active(-1)
            self.completed = True

    def join(self) -> Any:
        """Wait for the function to finish and return its result.

        An exception raised by the function is raised again here.
        """
        self._thread.join()
        if self._error is not None:
            raise self._error
        return self.result