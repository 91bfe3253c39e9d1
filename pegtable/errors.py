"""
Exceptions raised by the rule table and variable counter.
"""

__all__ = [
    "PegTableError",
    "UninitializedStateError",
    "UninitializedTableError",
    "UninitializedCounterError",
    "RuleNotFoundError",
]


class PegTableError(Exception):
    """Base class for all rule table and variable counter errors."""


class UninitializedStateError(PegTableError):
    """
    A scope key was read before the operation which initialises it was run.
    The missing scope key is given as the sole argument.
    """


class UninitializedTableError(UninitializedStateError):
    """The rule table was used before :py:func:`.create_empty_tables`."""


class UninitializedCounterError(UninitializedStateError):
    """The variable counter was used before :py:func:`.reset_variables`."""


class RuleNotFoundError(PegTableError):
    """No rule with the given name has been added to the rule table."""
