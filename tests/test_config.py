"""Tests for the default equality configuration."""

import os

import pytest

from corextensions import distance_to
from corextensions._config import get_equality, set_equality
from corextensions.equality import resolve_equality, shallow_equals, value_equality


class TestGetEquality:
    """Tests for get_equality() resolution order."""

    def setup_method(self):
        """Reset state before each test."""
        import corextensions._config as _cfg

        _cfg._equality_override = None
        os.environ.pop("COREXTENSIONS_EQUALITY", None)

    def teardown_method(self):
        """Reset state after each test."""
        import corextensions._config as _cfg

        _cfg._equality_override = None
        os.environ.pop("COREXTENSIONS_EQUALITY", None)

    def test_default_is_value(self):
        assert get_equality() == "value"

    def test_env_var_overrides_default(self):
        os.environ["COREXTENSIONS_EQUALITY"] = "identity"
        assert get_equality() == "identity"

    def test_env_var_case_insensitive(self):
        os.environ["COREXTENSIONS_EQUALITY"] = "Identity"
        assert get_equality() == "identity"

    def test_unknown_env_var_ignored(self):
        os.environ["COREXTENSIONS_EQUALITY"] = "fuzzy"
        assert get_equality() == "value"

    def test_programmatic_override_wins_over_env(self):
        os.environ["COREXTENSIONS_EQUALITY"] = "identity"
        set_equality("value")
        assert get_equality() == "value"

    def test_auto_restores_default(self):
        set_equality("identity")
        assert get_equality() == "identity"
        set_equality("auto")
        assert get_equality() == "value"

    def test_auto_hands_back_to_environment(self):
        set_equality("value")
        os.environ["COREXTENSIONS_EQUALITY"] = " identity "
        assert get_equality() == "value"
        set_equality("auto")
        assert get_equality() == "identity"

    def test_override_reaches_public_functions(self):
        a, b = [1], [1]
        assert distance_to([a], [b]) == 0
        set_equality("identity")
        assert distance_to([a], [b]) == 1
        assert distance_to([a], [b], equality="value") == 0


class TestSetEquality:
    """Tests for set_equality() validation."""

    def setup_method(self):
        import corextensions._config as _cfg

        _cfg._equality_override = None

    def teardown_method(self):
        import corextensions._config as _cfg

        _cfg._equality_override = None

    def test_invalid_name_raises(self):
        with pytest.raises(ValueError, match="Unknown equality"):
            set_equality("fuzzy")

    def test_whitespace_stripped(self):
        set_equality("  IDENTITY ")
        assert get_equality() == "identity"


class TestResolveEquality:
    def setup_method(self):
        import corextensions._config as _cfg

        _cfg._equality_override = None
        os.environ.pop("COREXTENSIONS_EQUALITY", None)

    def test_none_uses_default(self):
        assert resolve_equality(None) is value_equality

    def test_named(self):
        eq = resolve_equality("identity")
        x = [1]
        assert eq(x, x)
        assert not eq(x, [1])

    def test_callable_passthrough(self):
        def fn(a, b):
            return True

        assert resolve_equality(fn) is fn

    def test_unknown_name_raises(self):
        with pytest.raises(ValueError, match="Unknown equality"):
            resolve_equality("fuzzy")

    def test_wrong_type_raises(self):
        with pytest.raises(TypeError, match="callable"):
            resolve_equality(3)


class TestShallowEquals:
    def test_equal(self):
        assert shallow_equals([0, 1, 2], (0, 1, 2))

    def test_length_differs(self):
        assert not shallow_equals([0, 1, 2], [0, 1])
        assert not shallow_equals([0, 1], [0, 1, 2])

    def test_nested_identity(self):
        a = [[0, 1], [2, 3]]
        b = [[0, 1], [2, 3]]
        assert shallow_equals(a, b)
        assert not shallow_equals(a, b, equality="identity")
