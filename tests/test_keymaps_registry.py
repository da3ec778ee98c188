import pytest

from txtedit.keymaps import (
    ActionRef,
    Binding,
    KeymapConflictError,
    KeymapRegistry,
    load_default_keymaps,
)
from txtedit.keymaps.defaults import DEFAULT_BINDINGS


def make_action(action_id: str = "core.test") -> ActionRef:
    return ActionRef(id=action_id, handler=lambda *args, **kwargs: None)


def make_binding(
    *,
    binding_id: str,
    mode: str = "normal",
    key: str = "ctrl+t",
    action_id: str = "core.test",
) -> Binding:
    return Binding(id=binding_id, mode=mode, key=key, action_id=action_id)


def test_register_binding_success() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    binding = make_binding(binding_id="normal.test")
    revision = registry.revision()

    registry.register_binding(binding)

    assert list(registry.iter_bindings(mode="normal")) == [binding]
    assert registry.binding_for("normal", "ctrl+t") == binding
    assert registry.revision() == revision + 1


def test_register_binding_conflict_detection() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    registry.register_binding(make_binding(binding_id="normal.test"))

    with pytest.raises(KeymapConflictError) as excinfo:
        registry.register_binding(make_binding(binding_id="normal.test.duplicate"))

    assert [b.id for b in excinfo.value.conflicts] == ["normal.test"]
    assert registry.binding_for("normal", "ctrl+t").id == "normal.test"


def test_same_key_in_other_mode_does_not_conflict() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())

    registry.register_binding(make_binding(binding_id="normal.test"))
    registry.register_binding(make_binding(binding_id="prompt.test", mode="prompt"))

    assert [b.id for b in registry.iter_bindings()] == ["normal.test", "prompt.test"]
    assert registry.binding_for("prompt", "ctrl+t").id == "prompt.test"


def test_duplicate_binding_id_rejected() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    registry.register_binding(make_binding(binding_id="normal.test"))

    with pytest.raises(ValueError):
        registry.register_binding(make_binding(binding_id="normal.test", key="ctrl+u"))


def test_binding_requires_registered_action() -> None:
    registry = KeymapRegistry()

    with pytest.raises(KeyError):
        registry.register_binding(make_binding(binding_id="normal.test"))


def test_duplicate_action_rejected() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())

    with pytest.raises(ValueError):
        registry.register_action(make_action())


def test_binding_requires_fields() -> None:
    with pytest.raises(ValueError):
        Binding(id="", mode="normal", key="x", action_id="core.test")
    with pytest.raises(ValueError):
        Binding(id="b", mode="normal", key="", action_id="core.test")


def test_action_ref_validates_handler() -> None:
    with pytest.raises(TypeError):
        ActionRef(id="core.bad", handler="not callable")  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        make_action("")


def test_load_default_keymaps_registers_everything() -> None:
    registry = KeymapRegistry()

    load_default_keymaps(registry)

    assert list(registry.iter_bindings("normal")) == list(DEFAULT_BINDINGS)
    assert registry.binding_for("normal", "ctrl+q").action_id == "file.quit"
    assert registry.binding_for("normal", "ctrl+s").action_id == "file.save"
    assert registry.binding_for("normal", "ctrl+f").action_id == "search.find"
    assert registry.binding_for("normal", "TAB") is None
