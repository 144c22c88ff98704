"""Tests for the plugin registry."""

import pytest

from actionkit.catalog.builder import SYSTEM_ACTIONS
from actionkit.plugins.exceptions import (
    DuplicateActionIdError,
    DuplicateTypeError,
    PluginValidationError,
)
from actionkit.plugins.registry import PluginRegistry, load_plugins
from tests.conftest import make_plugin


class TestRegister:
    """Tests for PluginRegistry.register."""

    def test_register_and_get(self, registry):
        """A registered plugin can be looked up by type."""
        plugin = make_plugin(type="acme")
        registry.register(plugin)

        assert registry.get("acme") is plugin
        assert "acme" in registry
        assert len(registry) == 1

    def test_get_unknown_type(self, registry):
        """Unknown types resolve to None."""
        assert registry.get("nope") is None
        assert "nope" not in registry

    def test_duplicate_type_rejected(self, registry):
        """Registering the same type twice raises and keeps the first descriptor."""
        first = make_plugin(type="acme", label="First")
        registry.register(first)

        with pytest.raises(DuplicateTypeError) as exc_info:
            registry.register(make_plugin(type="acme", label="Second"))

        assert exc_info.value.integration_type == "acme"
        assert len(registry) == 1
        assert registry.get("acme") is first

    def test_action_id_colliding_with_system_action_rejected(self):
        """Plugin actions may not shadow reserved system ids."""
        registry = PluginRegistry(reserved_action_ids=["acme/one"])

        with pytest.raises(DuplicateActionIdError) as exc_info:
            registry.register(make_plugin(type="acme"))

        assert exc_info.value.action_id == "acme/one"
        assert len(registry) == 0

    def test_failed_registration_leaves_no_action_ids(self):
        """A rejected plugin does not reserve any of its action ids."""
        registry = PluginRegistry(reserved_action_ids=["acme/two"])
        with pytest.raises(DuplicateActionIdError):
            registry.register(make_plugin(type="acme", slugs=("one", "two")))

        registry.register(make_plugin(type="acme", slugs=("one",)))
        assert [a.id for a in registry.get_all_actions()] == ["acme/one"]


class TestOrdering:
    """Tests for registration-order listing."""

    def test_get_all_in_registration_order(self, registry):
        """Plugins are listed in registration order, not alphabetically."""
        for plugin_type in ("zeta", "alpha", "mid"):
            registry.register(make_plugin(type=plugin_type))

        assert [p.type for p in registry.get_all()] == ["zeta", "alpha", "mid"]
        assert registry.types() == ["zeta", "alpha", "mid"]
        assert [p.type for p in registry] == ["zeta", "alpha", "mid"]

    def test_get_all_actions_flattens_in_order(self, registry):
        """Actions follow registration order, then declaration order."""
        registry.register(make_plugin(type="zeta", slugs=("z1", "z2")))
        registry.register(make_plugin(type="alpha", slugs=("a1", "a2", "a3")))

        actions = registry.get_all_actions()

        assert [a.id for a in actions] == [
            "zeta/z1",
            "zeta/z2",
            "alpha/a1",
            "alpha/a2",
            "alpha/a3",
        ]
        assert [a.integration for a in actions] == ["zeta"] * 2 + ["alpha"] * 3

    def test_action_count_matches_declarations(self, registry):
        """Flattened action count is the sum of every plugin's actions."""
        sizes = {"a": 1, "b": 4, "c": 2}
        for plugin_type, size in sizes.items():
            registry.register(
                make_plugin(type=plugin_type, slugs=tuple(f"s{i}" for i in range(size))),
            )

        assert len(registry.get_all_actions()) == sum(sizes.values())

    def test_get_action(self, registry):
        """Plugin actions are found by catalog id."""
        plugin = make_plugin(type="acme")
        registry.register(plugin)

        found = registry.get_action("acme/two")
        assert found is not None
        assert found[0] is plugin
        assert found[1].slug == "two"
        assert registry.get_action("acme/missing") is None
        assert registry.get_action("other/two") is None
        assert registry.get_action(SYSTEM_ACTIONS[0].id) is None


class TestLoadPlugins:
    """Tests for load_plugins."""

    def test_loads_builtin_modules(self, registry):
        """Modules exposing a descriptor are registered in the given order."""
        load_plugins(registry, ["actionkit.builtin.shopify", "actionkit.builtin.linear"])
        assert registry.types() == ["shopify", "linear"]

    def test_module_without_descriptor(self, registry):
        """A module without a plugin descriptor is a validation error."""
        with pytest.raises(PluginValidationError):
            load_plugins(registry, ["actionkit.builtin.shopify.credentials"])

    def test_loading_twice_rejected(self, builtin_registry):
        """Loading a bundled plugin into a registry that has it fails."""
        with pytest.raises(DuplicateTypeError):
            load_plugins(builtin_registry, ["actionkit.builtin.linear"])
