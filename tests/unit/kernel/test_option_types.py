"""Unit tests for the Option type and its constructors."""

from __future__ import annotations

import copy
import pickle

import pytest

from mp_option.kernel.types import NOTHING, Nothing, Option, Some, none, some


# ---------------------------------------------------------------------------
# Some
# ---------------------------------------------------------------------------


class TestSome:
    def test_some_is_some(self) -> None:
        s = Some(10)
        assert s.is_some()
        assert not s.is_none()

    def test_value_is_payload(self) -> None:
        obj = {"a": 1}
        assert Some(obj).value is obj

    def test_kind_discriminant(self) -> None:
        assert Some(1).kind == "some"

    def test_equality_by_payload(self) -> None:
        assert Some(5) == Some(5)
        assert Some(5) != Some(6)
        assert Some(5) != NOTHING

    def test_hashable(self) -> None:
        assert {Some(1), Some(1), Some(2)} == {Some(1), Some(2)}

    def test_payload_cannot_be_reassigned(self) -> None:
        s = Some(1)
        with pytest.raises(AttributeError):
            s._value = 2  # type: ignore[misc]
        with pytest.raises(AttributeError):
            s.value = 2  # type: ignore[misc]
        assert s.value == 1

    def test_some_iter(self) -> None:
        assert list(Some(5)) == [5]

    def test_repr(self) -> None:
        assert repr(Some(1)) == "Some(1)"
        assert repr(Some("x")) == "Some('x')"

    def test_match_statement(self) -> None:
        opt: Option[int] = Some(3)
        match opt:
            case Some(value):
                result = value
            case Nothing():
                result = -1
        assert result == 3

    def test_copy_and_pickle_preserve_payload(self) -> None:
        s = Some([1, 2])
        assert copy.copy(s) == s
        assert copy.deepcopy(s) == s
        assert pickle.loads(pickle.dumps(s)) == s


# ---------------------------------------------------------------------------
# Nothing
# ---------------------------------------------------------------------------


class TestNothing:
    def test_nothing_is_none(self) -> None:
        assert NOTHING.is_none()
        assert not NOTHING.is_some()

    def test_kind_discriminant(self) -> None:
        assert NOTHING.kind == "none"

    def test_singleton(self) -> None:
        assert Nothing() is NOTHING
        assert Nothing() is Nothing()

    def test_nothing_iter(self) -> None:
        assert list(NOTHING) == []

    def test_repr(self) -> None:
        assert repr(NOTHING) == "Nothing"

    def test_is_immutable(self) -> None:
        with pytest.raises(AttributeError):
            NOTHING.value = 1  # type: ignore[attr-defined]

    def test_copy_and_pickle_keep_identity(self) -> None:
        assert copy.copy(NOTHING) is NOTHING
        assert copy.deepcopy(NOTHING) is NOTHING
        assert pickle.loads(pickle.dumps(NOTHING)) is NOTHING

    def test_match_statement(self) -> None:
        opt: Option[int] = NOTHING
        match opt:
            case Some(value):
                result = value
            case Nothing():
                result = -1
        assert result == -1


# ---------------------------------------------------------------------------
# Constructors
# ---------------------------------------------------------------------------


class TestConstructors:
    def test_some_wraps_number(self) -> None:
        opt = some(5)
        assert isinstance(opt, Some)
        assert opt.value == 5

    def test_some_wraps_object_by_reference(self) -> None:
        obj = {"a": 1}
        assert some(obj).value is obj

    def test_some_accepts_none_payload(self) -> None:
        opt = some(None)
        assert opt.is_some()
        assert opt.value is None

    def test_none_returns_singleton(self) -> None:
        assert none() is NOTHING
        assert none() is none()


# ---------------------------------------------------------------------------
# Public re-export surface
# ---------------------------------------------------------------------------


class TestPublicReExports:
    """Ensure everything declared in __all__ is importable."""

    @pytest.mark.parametrize(
        "module_name",
        ["mp_option", "mp_option.kernel", "mp_option.kernel.types", "mp_option.combinators"],
    )
    def test_all_symbols_importable(self, module_name: str) -> None:
        import importlib
        mod = importlib.import_module(module_name)
        for name in mod.__all__:
            assert hasattr(mod, name), f"{name!r} listed in __all__ but not found"

    def test_top_level_does_not_shadow_builtins(self) -> None:
        import mp_option
        assert "map" not in mp_option.__all__
        assert "filter" not in mp_option.__all__
