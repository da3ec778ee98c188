"""Keymap registry responsible for storing actions and bindings."""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, Optional

from txtedit.runtime.telemetry import span

from .models import ActionRef, Binding


class KeymapConflictError(RuntimeError):
    """Raised when a new binding claims a key that is already bound."""

    def __init__(self, binding: Binding, conflicts: Iterable[Binding]):
        conflicts_tuple = tuple(conflicts)
        message = (
            f"Binding '{binding.id}' conflicts with {[b.id for b in conflicts_tuple]}"
        )
        super().__init__(message)
        self.binding = binding
        self.conflicts = conflicts_tuple


class KeymapRegistry:
    """Owns action references and the per-mode key index."""

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._actions: Dict[str, ActionRef] = {}
        self._bindings: Dict[str, Binding] = {}
        self._mode_index: Dict[str, Dict[str, str]] = {}
        self._logger_name = logger_name
        self._revision = 0

    def revision(self) -> int:
        return self._revision

    def get_action(self, action_id: str) -> ActionRef:
        try:
            return self._actions[action_id]
        except KeyError as exc:
            raise KeyError(f"Action '{action_id}' is not registered") from exc

    def register_action(self, action: ActionRef) -> ActionRef:
        with span(
            "keymaps::register_action",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"action_id": action.id},
        ):
            if action.id in self._actions:
                raise ValueError(f"Action '{action.id}' already registered")
            self._actions[action.id] = action
            return action

    def register_binding(self, binding: Binding) -> Binding:
        with span(
            "keymaps::register_binding",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"binding_id": binding.id, "mode": binding.mode},
        ) as handle:
            if binding.action_id not in self._actions:
                handle.add_metadata("missing_action", binding.action_id)
                raise KeyError(
                    f"Binding '{binding.id}' references unknown action '{binding.action_id}'"
                )
            if binding.id in self._bindings:
                raise ValueError(f"Binding id '{binding.id}' already registered")

            conflict = self.binding_for(binding.mode, binding.key)
            if conflict is not None:
                handle.add_metadata("conflicts", conflict.id)
                raise KeymapConflictError(binding, (conflict,))

            self._bindings[binding.id] = binding
            self._mode_index.setdefault(binding.mode, {})[binding.key] = binding.id
            self._revision += 1
            return binding

    def binding_for(self, mode: str, key: str) -> Optional[Binding]:
        binding_id = self._mode_index.get(mode, {}).get(key)
        if binding_id is None:
            return None
        return self._bindings[binding_id]

    def iter_bindings(self, mode: Optional[str] = None) -> Iterator[Binding]:
        if mode is None:
            yield from self._bindings.values()
            return
        for binding_id in self._mode_index.get(mode, {}).values():
            yield self._bindings[binding_id]


__all__ = ["KeymapRegistry", "KeymapConflictError"]
