"""Tests for the top-level ``dispatching`` package — public API surface."""

import importlib

import pytest

import dispatching


class TestPublicApi:
    @pytest.mark.parametrize("name", dispatching.__all__)
    def test_name_resolves_to_defining_module(self, name: str) -> None:
        module = importlib.import_module(dispatching._LAZY_IMPORTS[name])
        assert getattr(dispatching, name) is getattr(module, name)

    def test_registry_matches_all(self) -> None:
        assert sorted(dispatching._LAZY_IMPORTS) == sorted(dispatching.__all__)

    def test_unknown_name(self) -> None:
        with pytest.raises(AttributeError, match="has no attribute 'Router'"):
            dispatching.Router  # noqa: B018

    def test_version(self) -> None:
        assert dispatching.__version__ == "0.1.0"


class TestQuickstart:
    def test_readme_example(self) -> None:
        def show(params: dict[str, str]) -> str:
            return f"{params['controller']}#{params['action']}"

        dispatcher = dispatching.Dispatcher([
            ("/", lambda params: "home"),
            ("/<controller>/<action>", show),
        ])

        assert dispatcher.dispatch("/") == "home"
        assert dispatcher.dispatch("https://example.com/users/list?page=2") == "users#list"
        assert dispatcher.dispatch("/a/b/c/d") is None
