"""Plugins domain exceptions."""


class PluginValidationError(Exception):
    pass


class RegistrationError(Exception):
    """Base exception for plugin registration errors."""


class DuplicateTypeError(RegistrationError):
    """Raised when a plugin type is registered twice."""

    def __init__(self, integration_type: str):
        super().__init__(f"Plugin type '{integration_type}' is already registered")
        self.integration_type = integration_type


class DuplicateActionIdError(RegistrationError):
    """Raised when an action id collides with one already in the catalog."""

    def __init__(self, action_id: str):
        super().__init__(f"Action id '{action_id}' is already in use")
        self.action_id = action_id


class HookResolutionError(Exception):
    """Base exception for deferred hook resolution errors."""


class CodegenTemplateNotFoundError(HookResolutionError):
    """Raised when no codegen template exists for an action."""
