"""Tests for dispatching.context — dispatch-scoped receiving context."""

import pytest

from dispatching.context import context_var, current_context
from dispatching.dispatcher import Dispatcher


class TestCurrentContext:
    def test_outside_dispatch_raises(self) -> None:
        with pytest.raises(LookupError):
            current_context()

    def test_returns_set_value(self) -> None:
        marker = object()
        token = context_var.set(marker)
        try:
            assert current_context() is marker
        finally:
            context_var.reset(token)

    def test_nested_dispatch_restores_outer(self) -> None:
        outer_ctx, inner_ctx = object(), object()
        seen: list[object] = []
        inner = Dispatcher([("/", lambda params: current_context())])

        def outer_handler(params: dict[str, str]) -> None:
            seen.append(current_context())
            seen.append(inner.dispatch("/", inner_ctx))
            seen.append(current_context())

        Dispatcher([("/", outer_handler)]).dispatch("/", outer_ctx)
        assert seen == [outer_ctx, inner_ctx, outer_ctx]
