"""actionkit - plugin registry and action catalog for workflow builders"""

from actionkit.__version__ import __version__
from actionkit.catalog import ActionGrid, build_catalog, create_registry
from actionkit.plugins import PluginDescriptor, PluginRegistry

__all__ = [
    "ActionGrid",
    "PluginDescriptor",
    "PluginRegistry",
    "__version__",
    "build_catalog",
    "create_registry",
]
