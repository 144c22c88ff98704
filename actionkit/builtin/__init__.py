"""Plugins bundled with actionkit"""

from actionkit.plugins.registry import PluginRegistry, load_plugins

BUILTIN_PLUGINS = (
    "actionkit.builtin.linear",
    "actionkit.builtin.shopify",
)


def register_builtin_plugins(registry: PluginRegistry) -> PluginRegistry:
    load_plugins(registry, BUILTIN_PLUGINS)
    return registry
