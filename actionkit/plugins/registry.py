"""Process-lifetime store of plugin descriptors"""

from __future__ import annotations

import importlib
from collections.abc import Iterable, Iterator

from loguru import logger

from actionkit.plugins.exceptions import (
    DuplicateActionIdError,
    DuplicateTypeError,
    PluginValidationError,
)
from actionkit.plugins.schemas import (
    Action,
    ActionDescriptor,
    IntegrationType,
    PluginDescriptor,
)


class PluginRegistry:
    """Registered plugins keyed by integration type, in registration order.

    Plugins are registered once at startup; there is no removal. A rejected
    registration leaves the registry unchanged.
    """

    def __init__(self, reserved_action_ids: Iterable[str] = ()):
        self._plugins: dict[IntegrationType, PluginDescriptor] = {}
        self._action_ids: set[str] = set(reserved_action_ids)

    def register(self, descriptor: PluginDescriptor) -> None:
        if descriptor.type in self._plugins:
            raise DuplicateTypeError(descriptor.type)

        new_ids = [descriptor.action_id(action.slug) for action in descriptor.actions]
        for action_id in new_ids:
            if action_id in self._action_ids:
                raise DuplicateActionIdError(action_id)

        self._plugins[descriptor.type] = descriptor
        self._action_ids.update(new_ids)
        logger.debug(
            f"Registered plugin '{descriptor.type}' with {len(new_ids)} actions",
        )

    def get(self, integration_type: IntegrationType) -> PluginDescriptor | None:
        return self._plugins.get(integration_type)

    def get_all(self) -> list[PluginDescriptor]:
        return list(self._plugins.values())

    def get_all_actions(self) -> list[Action]:
        return [
            Action(
                id=plugin.action_id(action.slug),
                label=action.label,
                description=action.description,
                category=action.category,
                integration=plugin.type,
            )
            for plugin in self._plugins.values()
            for action in plugin.actions
        ]

    def get_action(
        self,
        action_id: str,
    ) -> tuple[PluginDescriptor, ActionDescriptor] | None:
        """Look up a plugin action by its catalog id (``"<type>/<slug>"``)"""
        integration_type, sep, slug = action_id.partition("/")
        if not sep:
            return None
        plugin = self._plugins.get(integration_type)
        if plugin is None:
            return None
        action = plugin.get_action(slug)
        if action is None:
            return None
        return plugin, action

    def types(self) -> list[IntegrationType]:
        return list(self._plugins)

    def __contains__(self, integration_type: object) -> bool:
        return integration_type in self._plugins

    def __iter__(self) -> Iterator[PluginDescriptor]:
        return iter(self.get_all())

    def __len__(self) -> int:
        return len(self._plugins)


def load_plugins(registry: PluginRegistry, module_paths: Iterable[str]) -> None:
    """Import each module and register the descriptor it exposes as ``plugin``"""

    for module_path in module_paths:
        module = importlib.import_module(module_path)
        descriptor = getattr(module, "plugin", None)
        if not isinstance(descriptor, PluginDescriptor):
            raise PluginValidationError(
                f"Module '{module_path}' does not expose a 'plugin' descriptor",
            )
        registry.register(descriptor)
