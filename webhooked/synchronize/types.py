"""Type hints for the synchronize module."""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class HookLike(Protocol):
    """Protocol for objects shaped like a GitHub webhook."""

    id: int
    config: dict[str, Any]
    events: list[str]
