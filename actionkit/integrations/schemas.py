from __future__ import annotations

from pydantic import BaseModel

from actionkit.plugins.schemas import FormField, IntegrationType, PluginDescriptor


class IntegrationInstance(BaseModel):
    """A configured, credentialed instance of an integration type"""

    id: str
    name: str
    type: IntegrationType


class IntegrationDefinition(BaseModel):
    """Public summary of a registered integration, as listed to clients"""

    type: IntegrationType
    display_name: str
    description: str
    image: str | None = None
    form_fields: list[FormField]
    action_count: int
    testable: bool

    @classmethod
    def from_plugin(cls, plugin: PluginDescriptor) -> IntegrationDefinition:
        capabilities = plugin.capabilities()
        return cls(
            type=plugin.type,
            display_name=plugin.label,
            description=plugin.description,
            image=plugin.icon,
            form_fields=plugin.form_fields,
            action_count=capabilities.action_count,
            testable=capabilities.has_test_config,
        )
