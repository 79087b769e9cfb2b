"""Tests for perch.cli._resolve — Router import resolution."""

import sys
import types

import pytest

from perch.cli._resolve import resolve_router
from perch.router import Router


@pytest.fixture
def _fake_router_module(monkeypatch: pytest.MonkeyPatch) -> None:
    """Register a fake module with a perch Router on sys.modules."""
    mod = types.ModuleType("_fake_perch_app")
    mod.router = Router()  # type: ignore[attr-defined]
    mod.custom = Router()  # type: ignore[attr-defined]
    mod.not_a_router = "just a string"  # type: ignore[attr-defined]
    mod.factory = Router  # type: ignore[attr-defined]
    monkeypatch.setitem(sys.modules, "_fake_perch_app", mod)


@pytest.mark.usefixtures("_fake_router_module")
class TestResolveRouter:
    def test_explicit_attribute(self) -> None:
        assert isinstance(resolve_router("_fake_perch_app:router"), Router)

    def test_custom_attribute(self) -> None:
        router = resolve_router("_fake_perch_app:custom")
        assert router is sys.modules["_fake_perch_app"].custom  # type: ignore[attr-defined]

    def test_default_attribute(self) -> None:
        """Omitting :attr defaults to 'router'."""
        router = resolve_router("_fake_perch_app")
        assert router is sys.modules["_fake_perch_app"].router  # type: ignore[attr-defined]

    def test_missing_module(self) -> None:
        with pytest.raises(ModuleNotFoundError):
            resolve_router("nonexistent_module_xyz:router")

    def test_missing_attribute(self) -> None:
        with pytest.raises(AttributeError):
            resolve_router("_fake_perch_app:does_not_exist")

    def test_wrong_type(self) -> None:
        with pytest.raises(TypeError, match="not a perch Router"):
            resolve_router("_fake_perch_app:not_a_router")

    def test_callable_is_not_called(self) -> None:
        with pytest.raises(TypeError, match="resolved to type"):
            resolve_router("_fake_perch_app:factory")
