"""Built-in keymaps that seed normal mode with the editor's bindings."""

from __future__ import annotations

from txtedit.actions import core as core_actions
from txtedit.actions import file as file_actions
from txtedit.actions import search as search_actions
from txtedit.keys import events as keys

from .models import ActionRef, Binding
from .registry import KeymapRegistry

DEFAULT_ACTIONS: tuple[ActionRef, ...] = (
    ActionRef(
        id="file.quit",
        handler=file_actions.quit_editor,
        description="Quit, confirming first when there are unsaved changes",
    ),
    ActionRef(
        id="file.save",
        handler=file_actions.save,
        description="Write the document to disk",
    ),
    ActionRef(
        id="search.find",
        handler=search_actions.find,
        description="Incremental search",
    ),
    ActionRef(
        id="edit.newline",
        handler=core_actions.insert_newline,
        description="Split the line at the cursor",
    ),
    ActionRef(
        id="edit.delete_backward",
        handler=core_actions.delete_backward,
        description="Delete the character left of the cursor",
    ),
    ActionRef(
        id="edit.delete_forward",
        handler=core_actions.delete_forward,
        description="Delete the character under the cursor",
    ),
    ActionRef(
        id="cursor.move",
        handler=core_actions.move_cursor,
        description="Move the cursor",
    ),
    ActionRef(
        id="core.noop",
        handler=core_actions.noop_action,
        description="Swallow the key",
    ),
)


def _bind(binding_id: str, key: str, action_id: str, description: str = "") -> Binding:
    return Binding(
        id=binding_id,
        mode="normal",
        key=key,
        action_id=action_id,
        description=description,
    )


DEFAULT_BINDINGS: tuple[Binding, ...] = (
    _bind("normal.quit", "ctrl+q", "file.quit", "Quit"),
    _bind("normal.save", "ctrl+s", "file.save", "Save"),
    _bind("normal.find", "ctrl+f", "search.find", "Find"),
    _bind("normal.newline", keys.ENTER, "edit.newline"),
    _bind("normal.backspace", keys.BACKSPACE, "edit.delete_backward"),
    _bind("normal.ctrl_h", "ctrl+h", "edit.delete_backward"),
    _bind("normal.delete", keys.DELETE, "edit.delete_forward"),
    _bind("normal.arrow_up", keys.ARROW_UP, "cursor.move"),
    _bind("normal.arrow_down", keys.ARROW_DOWN, "cursor.move"),
    _bind("normal.arrow_left", keys.ARROW_LEFT, "cursor.move"),
    _bind("normal.arrow_right", keys.ARROW_RIGHT, "cursor.move"),
    _bind("normal.home", keys.HOME, "cursor.move"),
    _bind("normal.end", keys.END, "cursor.move"),
    _bind("normal.page_up", keys.PAGE_UP, "cursor.move"),
    _bind("normal.page_down", keys.PAGE_DOWN, "cursor.move"),
    _bind("normal.refresh", "ctrl+l", "core.noop"),
    _bind("normal.escape", keys.ESC, "core.noop"),
)


def load_default_keymaps(registry: KeymapRegistry) -> None:
    """Register built-in actions and bindings."""

    for action in DEFAULT_ACTIONS:
        registry.register_action(action)
    for binding in DEFAULT_BINDINGS:
        registry.register_binding(binding)


__all__ = ["load_default_keymaps", "DEFAULT_ACTIONS", "DEFAULT_BINDINGS"]
