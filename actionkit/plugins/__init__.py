"""Plugin domain - everything related to plugin registration"""

from actionkit.plugins.exceptions import (
    CodegenTemplateNotFoundError,
    DuplicateActionIdError,
    DuplicateTypeError,
    HookResolutionError,
    PluginValidationError,
    RegistrationError,
)
from actionkit.plugins.hooks import (
    UNTESTABLE,
    resolve_codegen_template,
    resolve_test_function,
    run_credential_test,
)
from actionkit.plugins.registry import PluginRegistry, load_plugins
from actionkit.plugins.schemas import (
    Action,
    ActionDescriptor,
    ConfigField,
    ConfigFieldOption,
    CredentialTestConfig,
    CredentialTestResult,
    FormField,
    HelpLink,
    IntegrationType,
    OutputField,
    PluginCapabilities,
    PluginDescriptor,
    lazy_import,
)

__all__ = [
    "UNTESTABLE",
    "Action",
    "ActionDescriptor",
    "CodegenTemplateNotFoundError",
    "ConfigField",
    "ConfigFieldOption",
    "CredentialTestConfig",
    "CredentialTestResult",
    "DuplicateActionIdError",
    "DuplicateTypeError",
    "FormField",
    "HelpLink",
    "HookResolutionError",
    "IntegrationType",
    "OutputField",
    "PluginCapabilities",
    "PluginDescriptor",
    "PluginRegistry",
    "PluginValidationError",
    "RegistrationError",
    "lazy_import",
    "load_plugins",
    "resolve_codegen_template",
    "resolve_test_function",
    "run_credential_test",
]
