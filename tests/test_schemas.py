"""Tests for plugin and action descriptors."""

import pytest
from pydantic import ValidationError

from actionkit.plugins.schemas import (
    ConfigField,
    ConfigFieldOption,
    CredentialTestConfig,
    PluginDescriptor,
    lazy_import,
)
from tests.conftest import make_action, make_plugin


class TestConfigField:
    """Tests for ConfigField validation."""

    def test_select_requires_options(self):
        """A select field without options is rejected."""
        with pytest.raises(ValidationError):
            ConfigField(key="status", label="Status", type="select")

    def test_select_default_must_be_an_option(self):
        """A select default outside its options is rejected."""
        with pytest.raises(ValidationError):
            ConfigField(
                key="status",
                label="Status",
                type="select",
                default_value="missing",
                options=[ConfigFieldOption(value="any", label="Any")],
            )

    def test_accepts_camel_case_keys(self):
        """Payloads in camelCase populate snake_case fields."""
        field = ConfigField.model_validate(
            {"key": "limit", "label": "Limit", "type": "number", "defaultValue": "50", "min": 1},
        )
        assert field.default_value == "50"
        assert field.min == 1


class TestActionDescriptor:
    """Tests for ActionDescriptor validation."""

    def test_duplicate_config_keys_rejected(self):
        """Config field keys must be unique within an action."""
        fields = [
            ConfigField(key="title", label="Title", type="template-input"),
            ConfigField(key="title", label="Again", type="template-input"),
        ]
        with pytest.raises(ValidationError):
            make_action("create", config_fields=fields)


class TestPluginDescriptor:
    """Tests for PluginDescriptor validation and helpers."""

    def test_empty_category_inherits_plugin_label(self):
        """Actions without a category are grouped under the plugin label."""
        plugin = make_plugin(type="acme", label="Acme Corp")
        assert {action.category for action in plugin.actions} == {"Acme Corp"}

    def test_explicit_category_kept(self):
        """A declared category is not overwritten."""
        plugin = make_plugin(category="Sales")
        assert plugin.actions[0].category == "Sales"

    def test_duplicate_slugs_rejected(self):
        """Action slugs must be unique within a plugin."""
        with pytest.raises(ValidationError):
            make_plugin(slugs=("one", "one"))

    def test_empty_type_rejected(self):
        """A plugin type may not be empty."""
        with pytest.raises(ValidationError):
            PluginDescriptor(type="", label="Nothing")

    def test_capabilities(self):
        """Capabilities report test support and action count."""
        plugin = make_plugin(slugs=("a", "b", "c"))
        assert plugin.capabilities().has_test_config is False
        assert plugin.capabilities().action_count == 3

    def test_get_action_and_action_id(self):
        """Actions are looked up by slug and addressed as type/slug."""
        plugin = make_plugin(type="acme")
        assert plugin.get_action("two").slug == "two"
        assert plugin.get_action("missing") is None
        assert plugin.action_id("two") == "acme/two"

    def test_test_config_excluded_from_dump(self):
        """The deferred accessor never appears in serialized descriptors."""
        plugin = make_plugin(
            test_config=CredentialTestConfig(get_test_function=lambda: None),
        )
        assert "test_config" not in plugin.model_dump()
        assert "testConfig" not in plugin.model_dump(by_alias=True)


class TestLazyImport:
    """Tests for lazy_import."""

    def test_resolves_on_call(self):
        """The factory imports and returns the attribute when invoked."""
        factory = lazy_import("json:dumps")
        import json

        assert factory() is json.dumps

    def test_rejects_malformed_target(self):
        """Targets must be written as module:attribute."""
        with pytest.raises(ValueError):
            lazy_import("json.dumps")

    def test_does_not_import_until_called(self):
        """Building the factory for a missing module does not fail."""
        factory = lazy_import("actionkit_missing_module:thing")
        with pytest.raises(ModuleNotFoundError):
            factory()
