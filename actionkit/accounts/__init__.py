"""Accounts domain - linked third-party accounts and their team directory"""

from actionkit.accounts.directory import DirectoryClient, get_teams, merge_teams
from actionkit.accounts.exceptions import (
    AccountAccessError,
    FeatureDisabledError,
    NoLinkedAccountError,
    NotAuthenticatedError,
)
from actionkit.accounts.linking import AccountLinkingService, MemoryAccountLinkingService
from actionkit.accounts.schemas import LinkedAccount, Team, TeamsResponse, UserInfo

__all__ = [
    "AccountAccessError",
    "AccountLinkingService",
    "DirectoryClient",
    "FeatureDisabledError",
    "LinkedAccount",
    "MemoryAccountLinkingService",
    "NoLinkedAccountError",
    "NotAuthenticatedError",
    "Team",
    "TeamsResponse",
    "UserInfo",
    "get_teams",
    "merge_teams",
]
