"""In-memory store of orchestration contexts.

One store belongs to one ``Orchestrator``.  Contexts live until they are
removed explicitly; nothing is persisted.
"""

from __future__ import annotations

from collections.abc import Iterator

from .models import OrchestrationContext


class AppContextStore:
    """Insertion-ordered mapping of ``app_id -> OrchestrationContext``."""

    def __init__(self) -> None:
        self._contexts: dict[str, OrchestrationContext] = {}

    def put(self, context: OrchestrationContext) -> None:
        self._contexts[context.app_id] = context

    def get(self, app_id: str) -> OrchestrationContext | None:
        return self._contexts.get(app_id)

    def remove(self, app_id: str) -> OrchestrationContext | None:
        """Remove and return the context, or ``None`` if it is unknown."""
        return self._contexts.pop(app_id, None)

    def snapshot(self, app_id: str) -> OrchestrationContext | None:
        """Deep copy of the stored context, safe to hand to callers."""
        context = self._contexts.get(app_id)
        if context is None:
            return None
        return context.model_copy(deep=True)

    def snapshots(self) -> list[OrchestrationContext]:
        return [c.model_copy(deep=True) for c in self._contexts.values()]

    def clear(self) -> None:
        self._contexts.clear()

    def __contains__(self, app_id: object) -> bool:
        return app_id in self._contexts

    def __len__(self) -> int:
        return len(self._contexts)

    def __iter__(self) -> Iterator[str]:
        return iter(self._contexts)
