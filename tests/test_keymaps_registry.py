import pytest

from sheet_engine.keymaps import (
    DEFAULT_BINDINGS,
    ActionRef,
    Binding,
    KeymapConflictError,
    KeymapRegistry,
    KeyTable,
    load_default_keymaps,
)


def make_action(action_id: str = "core.test") -> ActionRef:
    return ActionRef(id=action_id, handler=lambda state, event=None: None)


def make_binding(
    *,
    binding_id: str,
    table: KeyTable = KeyTable.PLAIN,
    key: str = "F2",
    action_id: str = "core.test",
) -> Binding:
    return Binding(id=binding_id, table=table, key=key, action_id=action_id)


def test_register_binding_success() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    binding = make_binding(binding_id="plain.f2")

    registry.register_binding(binding)

    assert registry.stats().binding_count == 1
    assert list(registry.iter_bindings(KeyTable.PLAIN)) == [binding]
    assert registry.lookup(KeyTable.PLAIN, "F2") == binding


def test_register_binding_conflict_detection() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    registry.register_binding(make_binding(binding_id="plain.f2"))

    with pytest.raises(KeymapConflictError):
        registry.register_binding(make_binding(binding_id="plain.f2.duplicate"))


def test_same_key_in_different_tables_does_not_conflict() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())

    registry.register_binding(make_binding(binding_id="plain"))
    registry.register_binding(make_binding(binding_id="ctrl", table=KeyTable.CTRL))

    assert registry.stats().tables == (KeyTable.CTRL, KeyTable.PLAIN)


def test_register_binding_with_replace() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    first = make_binding(binding_id="first")
    second = make_binding(binding_id="second")

    registry.register_binding(first)
    registry.register_binding(second, replace=True)

    assert list(registry.iter_bindings()) == [second]
    assert registry.lookup(KeyTable.PLAIN, "F2") == second


def test_register_binding_requires_known_action() -> None:
    registry = KeymapRegistry()

    with pytest.raises(KeyError):
        registry.register_binding(make_binding(binding_id="orphan"))


def test_update_binding_moves_key() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    registry.register_binding(make_binding(binding_id="binding"))
    revision = registry.revision()

    updated = registry.update_binding("binding", key="F3", description="rename")

    assert updated.key == "F3"
    assert registry.lookup(KeyTable.PLAIN, "F2") is None
    assert registry.lookup(KeyTable.PLAIN, "F3") == updated
    assert registry.revision() > revision


def test_unregister_binding() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    binding = make_binding(binding_id="binding")
    registry.register_binding(binding)

    removed = registry.unregister_binding("binding")

    assert removed == binding
    assert registry.stats().binding_count == 0
    assert registry.unregister_binding("binding") is None


def test_load_default_keymaps_populates_tables() -> None:
    registry = KeymapRegistry()

    load_default_keymaps(registry)

    stats = registry.stats()
    assert stats.binding_count == len(DEFAULT_BINDINGS)
    assert KeyTable.META not in stats.tables
    assert KeyTable.SHIFT_META not in stats.tables


def test_load_default_keymaps_respects_filters() -> None:
    registry = KeymapRegistry()

    load_default_keymaps(registry, exclude_actions=["core.clear"])

    assert registry.lookup(KeyTable.PLAIN, "Backspace") is None
    assert registry.lookup(KeyTable.PLAIN, "Enter") is not None


def test_binding_accepts_table_name() -> None:
    binding = Binding(id="b", table="ctrl+shift", key="ArrowUp", action_id="a")

    assert binding.table is KeyTable.CTRL_SHIFT
    assert binding.key_signature == "ctrl+shift:ArrowUp"


def test_binding_validation() -> None:
    with pytest.raises(ValueError):
        Binding(id="", table=KeyTable.PLAIN, key="x", action_id="a")
    with pytest.raises(TypeError):
        ActionRef(id="bad", handler="not callable")  # type: ignore[arg-type]
