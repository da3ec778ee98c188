"""Helper utilities for keymap-driven modes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .base_mode import ModeContext

if TYPE_CHECKING:  # pragma: no cover
    from txtedit.keymaps import KeymapResolver


def require_keymap_resolver(context: ModeContext) -> "KeymapResolver":
    resolver = context.extras.get("keymap_resolver")
    if resolver is None or not hasattr(resolver, "resolve"):
        raise RuntimeError("ModeContext.extras missing 'keymap_resolver'")
    return resolver  # type: ignore[return-value]


__all__ = ["require_keymap_resolver"]
