import pytest  # type: ignore

from pegtable.scope import Scope
from pegtable.errors import UninitializedCounterError, UninitializedStateError
from pegtable.variables import (
    VARIABLE_KEY,
    reset_variables,
    peek_variable,
    genvar,
)


@pytest.fixture
def scope() -> Scope:
    s = Scope()
    reset_variables(s)
    return s


def test_reset_returns_empty_string() -> None:
    assert reset_variables(Scope()) == ""


def test_reset_stores_zero() -> None:
    s = Scope()
    reset_variables(s)
    assert s.get(VARIABLE_KEY) == 0


@pytest.mark.parametrize("count", [1, 2, 10, 100])
def test_genvar_sequence(scope: Scope, count: int) -> None:
    names = [genvar(scope) for _ in range(count)]
    assert names == ["v{}".format(i) for i in range(count)]
    assert len(set(names)) == count
    assert scope.get(VARIABLE_KEY) == count


def test_reset_restarts_numbering(scope: Scope) -> None:
    assert genvar(scope) == "v0"
    assert genvar(scope) == "v1"
    reset_variables(scope)
    assert genvar(scope) == "v0"


def test_peek_does_not_advance(scope: Scope) -> None:
    assert peek_variable(scope) == "v0"
    assert peek_variable(scope) == "v0"
    assert genvar(scope) == "v0"
    assert peek_variable(scope) == "v1"


@pytest.mark.parametrize("fn", [genvar, peek_variable])
def test_uninitialized(fn) -> None:  # type: ignore
    s = Scope()
    with pytest.raises(UninitializedCounterError) as exc_info:
        fn(s)
    assert isinstance(exc_info.value, UninitializedStateError)
    assert exc_info.value.args == (VARIABLE_KEY,)
    assert VARIABLE_KEY not in s


def test_nested_counter_is_independent(scope: Scope) -> None:
    assert genvar(scope) == "v0"
    with scope.child():
        reset_variables(scope)
        assert genvar(scope) == "v0"
        assert genvar(scope) == "v1"
        assert genvar(scope) == "v2"
    assert genvar(scope) == "v1"


def test_nested_scope_shares_enclosing_counter(scope: Scope) -> None:
    assert genvar(scope) == "v0"
    with scope.child():
        assert genvar(scope) == "v1"
    assert genvar(scope) == "v2"
