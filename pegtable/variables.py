"""
Generation of unique variable names (``v0``, ``v1``, ...) for use within
generated rule bodies.
"""

import logging

from pegtable.errors import UninitializedCounterError
from pegtable.scope import ScopeStore, UndefinedScopeKeyError


__all__ = [
    "VARIABLE_KEY",
    "VARIABLE_PREFIX",
    "reset_variables",
    "peek_variable",
    "genvar",
]

logger = logging.getLogger(__name__)


VARIABLE_KEY = "variable"
"""The scope key under which the variable counter is stored."""

VARIABLE_PREFIX = "v"


def _get_counter(scope: ScopeStore) -> int:
    try:
        counter = scope.get(VARIABLE_KEY)
    except UndefinedScopeKeyError as exc:
        raise UninitializedCounterError(VARIABLE_KEY) from exc
    assert isinstance(counter, int)
    return counter


def reset_variables(scope: ScopeStore) -> str:
    """Define a new variable counter, starting from zero, in the current scope."""
    scope.add(VARIABLE_KEY, 0)
    logger.debug("Reset variable counter")
    return ""


def peek_variable(scope: ScopeStore) -> str:
    """Return the name the next call to :py:func:`genvar` will produce."""
    return f"{VARIABLE_PREFIX}{_get_counter(scope)}"


def genvar(scope: ScopeStore) -> str:
    """
    Return a fresh variable name and advance the counter.

    Raises :py:exc:`.UninitializedCounterError` if :py:func:`reset_variables`
    has not been called.
    """
    counter = _get_counter(scope)
    scope.modify(VARIABLE_KEY, counter + 1)
    return f"{VARIABLE_PREFIX}{counter}"
