"""Key-to-action resolution with telemetry instrumentation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Literal, Optional

from txtedit.runtime.telemetry import span

from .models import ActionRef, Binding
from .registry import KeymapRegistry


@dataclass(frozen=True, slots=True)
class ResolutionMatch:
    """Resolved binding paired with its action."""

    binding: Binding
    action: ActionRef


@dataclass(frozen=True, slots=True)
class ResolutionResult:
    """Outcome returned from the resolver."""

    status: Literal["match", "miss"]
    match: Optional[ResolutionMatch] = None


class KeymapResolver:
    """Caches per-mode lookup tables and resolves key tokens against them.

    A table is rebuilt whenever the registry's revision moves on.
    """

    def __init__(
        self, registry: KeymapRegistry, *, logger_name: str | None = None
    ) -> None:
        self._registry = registry
        self._logger_name = logger_name
        self._cache: Dict[str, tuple[int, Dict[str, ResolutionMatch]]] = {}

    def resolve(self, mode: str, token: str) -> ResolutionResult:
        with span(
            "keymaps::resolve",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"mode": mode, "key": token},
        ):
            match = self._ensure_table(mode).get(token)
        if match is None:
            return ResolutionResult(status="miss")
        return ResolutionResult(status="match", match=match)

    def _ensure_table(self, mode: str) -> Dict[str, ResolutionMatch]:
        revision = self._registry.revision()
        cached = self._cache.get(mode)
        if cached and cached[0] == revision:
            return cached[1]

        table: Dict[str, ResolutionMatch] = {}
        for binding in self._registry.iter_bindings(mode):
            action = self._registry.get_action(binding.action_id)
            table[binding.key] = ResolutionMatch(binding=binding, action=action)
        self._cache[mode] = (revision, table)
        return table


__all__ = [
    "KeymapResolver",
    "ResolutionResult",
    "ResolutionMatch",
]
