"""Boundary to the service that links third-party accounts to users"""

from __future__ import annotations

from typing import Protocol

from actionkit.accounts.schemas import LinkedAccount


class AccountLinkingService(Protocol):
    async def get_linked_account(
        self,
        user_id: str,
        provider_type: str,
    ) -> LinkedAccount | None: ...


class MemoryAccountLinkingService(AccountLinkingService):
    """Linked accounts held in memory, keyed by user and provider"""

    def __init__(self, accounts: list[LinkedAccount] | None = None):
        self._accounts: dict[tuple[str, str], LinkedAccount] = {}
        for account in accounts or []:
            self.link(account)

    def link(self, account: LinkedAccount) -> None:
        self._accounts[(account.user_id, account.provider_id)] = account

    async def get_linked_account(
        self,
        user_id: str,
        provider_type: str,
    ) -> LinkedAccount | None:
        return self._accounts.get((user_id, provider_type))
