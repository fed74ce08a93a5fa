"""Tests for the scoped environment."""

import pytest

from just_tcl import Environment
from just_tcl.errors import UndefinedVariable


class TestEnvironment:
    """Test variable lookup and assignment."""

    def test_set_and_get(self):
        env = Environment()
        assert env.set("a", "1") == "1"
        assert env.get("a") == "1"

    def test_initial_variables(self):
        env = Environment({"a": "1", "n": 5})
        assert env.get("a") == "1"
        assert env.get("n") == "5"

    def test_values_are_strings(self):
        env = Environment()
        env.set("n", 42)
        assert env.get("n") == "42"

    def test_undefined(self):
        with pytest.raises(UndefinedVariable) as info:
            Environment().get("missing")
        assert info.value.name == "missing"

    def test_exists_and_unset(self):
        env = Environment({"a": "1"})
        assert env.exists("a")
        assert "a" in env
        env.unset("a")
        assert not env.exists("a")
        env.unset("a")


class TestScopes:
    """Test scope push/pop and shadowing."""

    def test_inner_scope_shadows(self):
        env = Environment({"a": "global"})
        env.push_scope()
        env.set("a", "local")
        assert env.get("a") == "local"
        env.pop_scope()
        assert env.get("a") == "global"

    def test_outer_scope_visible(self):
        env = Environment({"a": "global"})
        with env.scope():
            assert env.get("a") == "global"

    def test_set_writes_innermost(self):
        env = Environment()
        with env.scope():
            env.set("a", "local")
        assert not env.exists("a")

    def test_global_write(self):
        env = Environment()
        with env.scope():
            env.set("a", "1", global_=True)
        assert env.get("a") == "1"

    def test_scope_popped_on_error(self):
        env = Environment()
        with pytest.raises(UndefinedVariable):
            with env.scope():
                env.get("missing")
        assert env.depth == 1

    def test_unwind_keeps_global(self):
        env = Environment({"a": "1"})
        env.push_scope()
        env.push_scope()
        env.unwind(1)
        assert env.depth == 1
        env.unwind(0)
        assert env.depth == 1
        assert env.get("a") == "1"

    def test_cannot_pop_global(self):
        with pytest.raises(RuntimeError):
            Environment().pop_scope()

    def test_to_dict_merges_scopes(self):
        env = Environment({"a": "1", "b": "2"})
        with env.scope():
            env.set("b", "3")
            assert env.to_dict() == {"a": "1", "b": "3"}
        assert env.globals == {"a": "1", "b": "2"}

    def test_copy_keeps_globals_only(self):
        env = Environment({"a": "1"})
        env.push_scope()
        env.set("b", "2")
        copy = env.copy()
        assert copy.depth == 1
        assert copy.to_dict() == {"a": "1"}
