"""Shared type aliases used across dispatching modules."""

from collections.abc import Callable
from typing import Any, TypeAlias

# Extracted URL parameters: raw, undecoded values keyed by placeholder name
Params: TypeAlias = dict[str, str]

# Route handler: receives the parameter mapping, returns anything
Handler: TypeAlias = Callable[..., Any]
