"""
Bindings of the rule table and variable counter operations under the names
used to call them from templates.
"""

from functools import partial

from typing import Callable, Dict, Tuple

from pegtable.scope import ScopeStore
from pegtable.rule_table import (
    create_empty_tables,
    add_rule,
    add_emitter,
    construct_peg,
)
from pegtable.variables import reset_variables, genvar


__all__ = [
    "TEMPLATE_FUNCTION_NAMES",
    "template_functions",
]


_TEMPLATE_FUNCTIONS: Dict[str, Callable[..., str]] = {
    "createEmptyTables": create_empty_tables,
    "addRule": add_rule,
    "addEmitter": add_emitter,
    "constructpeg": construct_peg,
    "resetVariables": reset_variables,
    "genvar": genvar,
}

TEMPLATE_FUNCTION_NAMES: Tuple[str, ...] = tuple(_TEMPLATE_FUNCTIONS)
"""The names under which :py:func:`template_functions` exposes each operation."""


def template_functions(scope: ScopeStore) -> Dict[str, Callable[..., str]]:
    """
    Return a dictionary of template function names to callables bound to the
    provided scope store.

    Each callable takes the remaining arguments of the corresponding operation
    and returns the text to be inserted into the rendered template: an empty
    string for operations which only update state.
    """
    return {name: partial(fn, scope) for name, fn in _TEMPLATE_FUNCTIONS.items()}
