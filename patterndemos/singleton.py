"""A thread-safe singleton and a client that uses it."""

from __future__ import annotations

import sys
import threading
from typing import TextIO


def _stream(out: TextIO | None) -> TextIO:
    return sys.stdout if out is None else out


_CREATE_KEY = object()


class Singleton:
    """Single shared object; obtain it with `get_instance`."""

    _instance: Singleton | None = None
    _lock = threading.Lock()

    def __init__(self, value: str, out: TextIO, *, _key: object = None) -> None:
        if _key is not _CREATE_KEY:
            raise TypeError("use Singleton.get_instance() to obtain the instance")
        self._value = value
        self._out = out

    @property
    def value(self) -> str:
        return self._value

    def __copy__(self):
        raise TypeError("Singleton cannot be copied")

    def __deepcopy__(self, memo):
        raise TypeError("Singleton cannot be copied")

    @classmethod
    def get_instance(cls, value: str, out: TextIO | None = None) -> Singleton:
        """Return the shared instance, creating it with `value` the first time."""
        stream = _stream(out)
        with cls._lock:
            if cls._instance is None:
                cls._instance = cls(value, stream, _key=_CREATE_KEY)
                stream.write(f"new singleton object created: {cls._instance.value}\n")
            else:
                cls._instance._out = stream
                stream.write(f"old singleton object used: {cls._instance.value}\n")
            return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Forget the shared instance so the next call creates a new one."""
        with cls._lock:
            cls._instance = None

    def do_some_task(self) -> None:
        self._out.write("task is done\n")


class SingletonClient:
    """Client that fetches the singleton and gives it a task."""

    def __init__(self, out: TextIO | None = None) -> None:
        self._out = _stream(out)

    def action(self, value: str) -> Singleton:
        self._out.write("\nClient Action\n")
        instance = Singleton.get_instance(value, self._out)
        instance.do_some_task()
        return instance