import doctest

import pegtable

from pegtable import __all__ as pegtable_all

from pegtable.errors import __all__ as errors_all
from pegtable.scope import __all__ as scope_all
from pegtable.rule_table import __all__ as rule_table_all
from pegtable.variables import __all__ as variables_all
from pegtable.template_functions import __all__ as template_functions_all


def test_all_is_complete() -> None:
    assert sorted(pegtable_all) == sorted(
        errors_all
        + scope_all
        + rule_table_all
        + variables_all
        + template_functions_all
    )


def test_documentation_examples() -> None:
    failures, _tests = doctest.testmod(pegtable)
    assert failures == 0
