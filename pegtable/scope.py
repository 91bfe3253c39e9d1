"""
Scoped key/value stores.

The rule table and variable counter keep all of their state in a scope store
supplied by the caller (usually a template engine). A store maps string keys
to values and supports three operations:

* ``add(key, value)`` defines a new binding, visible in the current scope and
  any scopes nested within it.
* ``get(key)`` returns the value of the innermost binding of ``key``.
* ``modify(key, value)`` overwrites the value of the innermost existing binding
  of ``key``, wherever it was defined.

Any object implementing :py:class:`ScopeStore` may be used. A simple
implementation, :py:class:`Scope`, is provided for when no template engine
store is available.
"""

from contextlib import contextmanager

from typing import Any, Dict, Iterator, List


__all__ = [
    "ScopeError",
    "UndefinedScopeKeyError",
    "ScopeStore",
    "Scope",
]


class ScopeError(Exception):
    """Base class for scope store errors."""


class UndefinedScopeKeyError(ScopeError, KeyError):
    """No binding exists for the given key in any enclosing scope."""


class ScopeStore:
    """The interface of a scoped key/value store. Abstract base class."""

    def get(self, key: str) -> Any:
        """
        Return the value of the innermost binding of ``key``, raising
        :py:exc:`UndefinedScopeKeyError` if no binding exists.
        """
        raise NotImplementedError()

    def add(self, key: str, value: Any) -> None:
        """Define a new binding of ``key`` in the current scope."""
        raise NotImplementedError()

    def modify(self, key: str, value: Any) -> None:
        """
        Overwrite the value of the innermost existing binding of ``key``,
        raising :py:exc:`UndefinedScopeKeyError` if no binding exists.
        """
        raise NotImplementedError()


class Scope(ScopeStore):
    """
    A :py:class:`ScopeStore` made of a stack of frames.

    Bindings added within a nested frame (see :py:meth:`push` and
    :py:meth:`child`) shadow those of enclosing frames and are discarded when
    the frame is popped. Values are stored as given: callers which require
    nested frames to be isolated from each other should store immutable
    values.
    """

    def __init__(self) -> None:
        self._frames: List[Dict[str, Any]] = [{}]

    @property
    def depth(self) -> int:
        """The number of frames, including the root frame."""
        return len(self._frames)

    def _frame_binding(self, key: str) -> Dict[str, Any]:
        for frame in reversed(self._frames):
            if key in frame:
                return frame
        raise UndefinedScopeKeyError(key)

    def __contains__(self, key: object) -> bool:
        return any(key in frame for frame in self._frames)

    def get(self, key: str) -> Any:
        return self._frame_binding(key)[key]

    def add(self, key: str, value: Any) -> None:
        self._frames[-1][key] = value

    def modify(self, key: str, value: Any) -> None:
        self._frame_binding(key)[key] = value

    def push(self) -> None:
        """Enter a new nested frame."""
        self._frames.append({})

    def pop(self) -> None:
        """Leave the innermost frame, discarding its bindings."""
        if len(self._frames) == 1:
            raise ScopeError("Cannot pop the root frame")
        self._frames.pop()

    @contextmanager
    def child(self) -> Iterator["Scope"]:
        """
        Context manager which enters a nested frame for the duration of the
        ``with`` block.
        """
        self.push()
        try:
            yield self
        finally:
            self.pop()
