"""Deferred resolution of plugin-supplied hooks.

Credential tests and codegen templates are only imported on first use, so
registering a plugin never pulls in its client code.
"""

from __future__ import annotations

import importlib
from collections.abc import Mapping
from functools import lru_cache
from typing import Final

from loguru import logger

from actionkit.plugins.exceptions import CodegenTemplateNotFoundError
from actionkit.plugins.schemas import (
    CredentialTestResult,
    PluginDescriptor,
    TestFunction,
)

CODEGEN_ATTRIBUTE = "CODEGEN_TEMPLATE"


class _Untestable:
    def __repr__(self) -> str:
        return "UNTESTABLE"

    def __bool__(self) -> bool:
        return False


UNTESTABLE: Final = _Untestable()


def resolve_test_function(descriptor: PluginDescriptor) -> TestFunction | _Untestable:
    """Return the plugin's credential test, or ``UNTESTABLE`` if it declares none"""

    if descriptor.test_config is None:
        return UNTESTABLE

    logger.debug(f"Resolving credential test for plugin '{descriptor.type}'")
    return descriptor.test_config.get_test_function()


async def run_credential_test(
    descriptor: PluginDescriptor,
    credentials: Mapping[str, str],
) -> CredentialTestResult:
    """Resolve and run a plugin's credential test, never raising"""

    try:
        test_function = resolve_test_function(descriptor)
    except Exception as e:  # noqa: BLE001 - Plugin import code is not ours, any failure is reported as a failed test.
        logger.error(f"Failed to load credential test for '{descriptor.type}': {e}")
        return CredentialTestResult.failed(f"Failed to load credential test: {e!s}")

    if test_function is UNTESTABLE:
        return CredentialTestResult.failed(
            f"Integration '{descriptor.type}' does not support connection tests",
        )

    try:
        result = await test_function(credentials)
    except Exception as e:  # noqa: BLE001 - Plugin test code is not ours, any failure is reported as a failed test.
        logger.error(f"Credential test for '{descriptor.type}' raised: {e}")
        return CredentialTestResult.failed(str(e))

    logger.info(
        f"Credential test for '{descriptor.type}' finished (success: {result.success})",
    )
    return result


@lru_cache(maxsize=256)
def _load_template(codegen_package: str, step_import_path: str) -> str:
    module_path = f"{codegen_package}.{step_import_path.replace('-', '_')}"
    try:
        module = importlib.import_module(module_path)
    except ModuleNotFoundError as e:
        raise CodegenTemplateNotFoundError(
            f"No codegen module '{module_path}'",
        ) from e

    template = getattr(module, CODEGEN_ATTRIBUTE, None)
    if not isinstance(template, str):
        raise CodegenTemplateNotFoundError(
            f"Module '{module_path}' does not define {CODEGEN_ATTRIBUTE}",
        )
    return template


def resolve_codegen_template(descriptor: PluginDescriptor, action_slug: str) -> str:
    """Return the codegen template for one of the plugin's actions, verbatim"""

    action = descriptor.get_action(action_slug)
    if action is None:
        raise CodegenTemplateNotFoundError(
            f"Plugin '{descriptor.type}' has no action '{action_slug}'",
        )
    if descriptor.codegen_package is None:
        raise CodegenTemplateNotFoundError(
            f"Plugin '{descriptor.type}' does not provide codegen templates",
        )

    return _load_template(descriptor.codegen_package, action.step_import_path)
