r"""
Pegtable accumulates Parsing Expression Grammar (PEG) rule declarations while a
template is being rendered and prints them as a block of ``define-peg`` forms.
It also hands out unique variable names for use within generated rule bodies.

Pegtable does not parse, check or run grammars: rule patterns and emitters are
treated as opaque strings.

Basic usage
===========

All state lives in a scope store supplied by the caller, usually the template
engine doing the rendering. When no such store is available, a
:py:class:`.Scope` may be used::

    >>> from pegtable import Scope
    >>> scope = Scope()

Rule table
----------

A rule table must be created before rules are added to it::

    >>> from pegtable import create_empty_tables, add_rule, add_emitter, construct_peg
    >>> create_empty_tables(scope)
    ''
    >>> add_rule(scope, "Digit", "[0-9]")
    ''
    >>> add_rule(scope, "Number", "(+ Digit)")
    ''

An emitter (the action applied to a rule's match) may be attached to a rule
any time after the rule has been added::

    >>> add_emitter(scope, "Digit", "(lambda (x) x)")
    ''

The accumulated rules are printed using :py:func:`.construct_peg`. Each rule
is given on its own line, preceded by a newline, in the order the rules were
added. Rules without an emitter are printed with ``undefined`` in its place::

    >>> construct_peg(scope)
    '\n(define-peg Digit [0-9] (lambda (x) x))\n(define-peg Number (+ Digit) undefined)'

Rule names are not required to be unique. If a name is used more than once
every rule is printed, but :py:func:`.add_emitter` only ever updates the first
rule with that name.

Attempting to attach an emitter to a rule which has not been added produces a
:py:exc:`.RuleNotFoundError`::

    >>> from pegtable import RuleNotFoundError
    >>> try:
    ...     add_emitter(scope, "Letter", "(lambda (x) x)")
    ... except RuleNotFoundError as e:
    ...     print("No rule named", e)
    No rule named Letter

Calling :py:func:`.create_empty_tables` again starts a new, empty table::

    >>> create_empty_tables(scope)
    ''
    >>> construct_peg(scope)
    ''

Variable names
--------------

Unique variable names are produced by :py:func:`.genvar` once the counter has
been reset using :py:func:`.reset_variables`::

    >>> from pegtable import reset_variables, genvar
    >>> reset_variables(scope)
    ''
    >>> genvar(scope)
    'v0'
    >>> genvar(scope)
    'v1'

Nested scopes
-------------

A table or counter created within a nested scope hides any defined in an
enclosing scope until the nested scope ends::

    >>> reset_variables(scope)
    ''
    >>> genvar(scope)
    'v0'
    >>> with scope.child():
    ...     _ = reset_variables(scope)
    ...     print(genvar(scope), genvar(scope))
    v0 v1
    >>> genvar(scope)
    'v1'

Template engines
----------------

:py:func:`.template_functions` returns each operation bound to a scope store
under the name templates use to call it::

    >>> from pegtable import template_functions
    >>> fns = template_functions(Scope())
    >>> fns["createEmptyTables"]()
    ''
    >>> fns["addRule"]("Space", "(* \" \")")
    ''
    >>> fns["constructpeg"]()
    '\n(define-peg Space (* " ") undefined)'


API Reference
=============

Rule table
----------

.. autoclass:: RuleRecord
    :members:

.. autofunction:: create_empty_tables

.. autofunction:: add_rule

.. autofunction:: add_emitter

.. autofunction:: construct_peg

.. autofunction:: get_rules

.. autofunction:: find_rule

.. autofunction:: duplicate_rule_names

Variable names
--------------

.. autofunction:: reset_variables

.. autofunction:: genvar

.. autofunction:: peek_variable

Scope stores
------------

.. autoclass:: ScopeStore
    :members:

.. autoclass:: Scope
    :members: depth, push, pop, child

Template functions
------------------

.. autofunction:: template_functions

Exceptions
----------

.. autoexception:: PegTableError

.. autoexception:: UninitializedStateError
    :show-inheritance:

.. autoexception:: UninitializedTableError
    :show-inheritance:

.. autoexception:: UninitializedCounterError
    :show-inheritance:

.. autoexception:: RuleNotFoundError
    :show-inheritance:

.. autoexception:: ScopeError

.. autoexception:: UndefinedScopeKeyError
    :show-inheritance:
"""


from pegtable.version import __version__

from pegtable.errors import *
from pegtable.scope import *
from pegtable.rule_table import *
from pegtable.variables import *
from pegtable.template_functions import *

# NB: These names are explicitly re-exported here because mypy in strict mode
# does not allow implicit re-exports. The completeness of this list is tested
# by the test suite.
__all__ = [  # noqa: F405
    # errors.*
    "PegTableError",
    "UninitializedStateError",
    "UninitializedTableError",
    "UninitializedCounterError",
    "RuleNotFoundError",
    # scope.*
    "ScopeError",
    "UndefinedScopeKeyError",
    "ScopeStore",
    "Scope",
    # rule_table.*
    "RULES_KEY",
    "DEFINE_PEG",
    "MISSING_EMITTER",
    "RuleRecord",
    "get_rules",
    "find_rule",
    "duplicate_rule_names",
    "create_empty_tables",
    "add_rule",
    "add_emitter",
    "construct_peg",
    # variables.*
    "VARIABLE_KEY",
    "VARIABLE_PREFIX",
    "reset_variables",
    "peek_variable",
    "genvar",
    # template_functions.*
    "TEMPLATE_FUNCTION_NAMES",
    "template_functions",
]
