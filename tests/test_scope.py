import pytest  # type: ignore

from pegtable.scope import (
    Scope,
    ScopeError,
    UndefinedScopeKeyError,
)


class TestScope:
    def test_add_and_get(self) -> None:
        s = Scope()
        s.add("foo", 123)
        assert s.get("foo") == 123
        assert "foo" in s
        assert "bar" not in s

    def test_get_undefined(self) -> None:
        s = Scope()
        with pytest.raises(UndefinedScopeKeyError):
            s.get("foo")

    def test_undefined_key_is_key_error(self) -> None:
        s = Scope()
        with pytest.raises(KeyError):
            s.get("foo")

    def test_modify_undefined(self) -> None:
        s = Scope()
        with pytest.raises(UndefinedScopeKeyError):
            s.modify("foo", 123)
        assert "foo" not in s

    def test_add_replaces_binding_in_same_frame(self) -> None:
        s = Scope()
        s.add("foo", 1)
        s.add("foo", 2)
        assert s.get("foo") == 2
        s.push()
        s.pop()
        assert s.get("foo") == 2

    def test_nested_add_shadows_outer_binding(self) -> None:
        s = Scope()
        s.add("foo", "outer")
        s.push()
        s.add("foo", "inner")
        assert s.get("foo") == "inner"
        s.pop()
        assert s.get("foo") == "outer"

    def test_modify_updates_enclosing_binding(self) -> None:
        s = Scope()
        s.add("foo", 1)
        s.push()
        s.modify("foo", 2)
        assert s.get("foo") == 2
        s.pop()
        assert s.get("foo") == 2

    def test_modify_updates_innermost_binding_only(self) -> None:
        s = Scope()
        s.add("foo", 1)
        s.push()
        s.add("foo", 10)
        s.modify("foo", 20)
        s.pop()
        assert s.get("foo") == 1

    def test_nested_bindings_discarded_on_pop(self) -> None:
        s = Scope()
        s.push()
        s.add("foo", 1)
        s.pop()
        assert "foo" not in s

    def test_depth(self) -> None:
        s = Scope()
        assert s.depth == 1
        s.push()
        s.push()
        assert s.depth == 3
        s.pop()
        assert s.depth == 2

    def test_cannot_pop_root(self) -> None:
        s = Scope()
        with pytest.raises(ScopeError):
            s.pop()

    def test_child(self) -> None:
        s = Scope()
        s.add("foo", "outer")
        with s.child() as child:
            assert child is s
            assert s.depth == 2
            s.add("foo", "inner")
            assert s.get("foo") == "inner"
        assert s.depth == 1
        assert s.get("foo") == "outer"

    def test_child_pops_on_exception(self) -> None:
        s = Scope()
        with pytest.raises(ValueError):
            with s.child():
                raise ValueError()
        assert s.depth == 1
