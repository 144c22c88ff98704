"""Account linking exceptions."""


class AccountAccessError(Exception):
    """Base exception for requests that cannot reach a linked account."""

    status_code = 400


class FeatureDisabledError(AccountAccessError):
    """Raised when the managed-keys feature is turned off."""

    status_code = 403

    def __init__(self, message: str = "Feature not enabled"):
        super().__init__(message)


class NotAuthenticatedError(AccountAccessError):
    """Raised when the request carries no authenticated user."""

    status_code = 401

    def __init__(self, message: str = "Not authenticated"):
        super().__init__(message)


class NoLinkedAccountError(AccountAccessError):
    """Raised when the user has no account linked with the provider."""

    status_code = 400

    def __init__(self, provider: str):
        super().__init__(f"No {provider.title()} account linked")
        self.provider = provider
