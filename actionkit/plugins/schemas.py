"""Declarative plugin and action descriptors"""

from __future__ import annotations

import importlib
from collections.abc import Awaitable, Callable, Mapping
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

IntegrationType = str

FormFieldType = Literal["text", "password", "number", "select", "url"]
ConfigFieldType = Literal[
    "template-input",
    "template-textarea",
    "select",
    "number",
    "text",
    "checkbox",
]


class DescriptorModel(BaseModel):
    """Base model accepting both snake_case and camelCase keys"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class HelpLink(DescriptorModel):
    text: str
    url: str


class FormField(DescriptorModel):
    """Credential or connection setting collected when configuring an integration"""

    id: str
    label: str
    type: FormFieldType = "text"
    config_key: str
    placeholder: str | None = None
    help_text: str | None = None
    help_link: HelpLink | None = None
    env_var: str | None = None


class ConfigFieldOption(DescriptorModel):
    value: str
    label: str


class ConfigField(DescriptorModel):
    """Per-node configuration input of an action"""

    key: str
    label: str
    type: ConfigFieldType
    placeholder: str | None = None
    example: str | None = None
    default_value: str | None = None
    required: bool = False
    min: float | None = None
    rows: int | None = None
    options: list[ConfigFieldOption] | None = None

    @model_validator(mode="after")
    def check_select_options(self) -> ConfigField:
        if self.type != "select":
            return self
        if not self.options:
            raise ValueError(f"Select field '{self.key}' must declare options")
        values = {option.value for option in self.options}
        if self.default_value is not None and self.default_value not in values:
            raise ValueError(
                f"Default value '{self.default_value}' of field '{self.key}' is not one of its options",
            )
        return self


class OutputField(DescriptorModel):
    field: str
    description: str


class ActionDescriptor(DescriptorModel):
    """An action exposed by a plugin"""

    slug: str = Field(min_length=1)
    label: str
    description: str
    category: str = ""  # Inherits the plugin label when empty
    step_function: str
    step_import_path: str
    output_fields: list[OutputField] = Field(default_factory=list)
    config_fields: list[ConfigField] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_unique_config_keys(self) -> ActionDescriptor:
        seen: set[str] = set()
        for config_field in self.config_fields:
            if config_field.key in seen:
                raise ValueError(
                    f"Duplicate config field '{config_field.key}' in action '{self.slug}'",
                )
            seen.add(config_field.key)
        return self


class CredentialTestResult(BaseModel):
    success: bool
    error: str | None = None

    @classmethod
    def ok(cls) -> CredentialTestResult:
        return cls(success=True)

    @classmethod
    def failed(cls, error: str) -> CredentialTestResult:
        return cls(success=False, error=error)


TestFunction = Callable[[Mapping[str, str]], Awaitable[CredentialTestResult]]


def lazy_import(target: str) -> Callable[[], Any]:
    """Build a zero-argument factory importing ``"package.module:attribute"`` on call.

    Nothing is imported until the factory is invoked.
    """
    module_path, _, attribute = target.partition(":")
    if not module_path or not attribute:
        raise ValueError(f"Expected 'module:attribute', got '{target}'")

    def factory() -> Any:
        module = importlib.import_module(module_path)
        return getattr(module, attribute)

    return factory


class CredentialTestConfig(BaseModel):
    """Deferred accessor for a plugin's credential test"""

    get_test_function: Callable[[], TestFunction]

    @classmethod
    def from_import_path(cls, target: str) -> CredentialTestConfig:
        return cls(get_test_function=lazy_import(target))


class PluginCapabilities(BaseModel):
    model_config = ConfigDict(frozen=True)

    has_test_config: bool
    action_count: int


class PluginDescriptor(DescriptorModel):
    """Everything an integration declares about itself"""

    type: IntegrationType = Field(min_length=1)
    label: str = Field(min_length=1)
    description: str = ""
    icon: str | None = None
    form_fields: list[FormField] = Field(default_factory=list)
    test_config: CredentialTestConfig | None = Field(default=None, exclude=True)
    actions: list[ActionDescriptor] = Field(default_factory=list)
    codegen_package: str | None = None

    @model_validator(mode="after")
    def check_actions(self) -> PluginDescriptor:
        seen: set[str] = set()
        for action in self.actions:
            if action.slug in seen:
                raise ValueError(
                    f"Duplicate action slug '{action.slug}' in plugin '{self.type}'",
                )
            seen.add(action.slug)
            if not action.category.strip():
                action.category = self.label
        return self

    def get_action(self, slug: str) -> ActionDescriptor | None:
        for action in self.actions:
            if action.slug == slug:
                return action
        return None

    def action_id(self, slug: str) -> str:
        return f"{self.type}/{slug}"

    def capabilities(self) -> PluginCapabilities:
        return PluginCapabilities(
            has_test_config=self.test_config is not None,
            action_count=len(self.actions),
        )


class Action(DescriptorModel):
    """Flattened catalog entry shared by system and plugin actions"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    id: str
    label: str
    description: str
    category: str = Field(min_length=1)
    integration: IntegrationType | None = None
