"""Remote account and team directory.

Lists the personal account and teams a linked user can act as. Either
lookup may fail on its own; the merged list then simply lacks that part.
"""

from __future__ import annotations

import asyncio
from typing import Any

import httpx
from loguru import logger

from actionkit.accounts.exceptions import (
    FeatureDisabledError,
    NoLinkedAccountError,
    NotAuthenticatedError,
)
from actionkit.accounts.linking import AccountLinkingService
from actionkit.accounts.schemas import Team, TeamsResponse, UserInfo
from actionkit.config import Settings
from actionkit.utils.text import locale_key, slugify

AVATAR_URL = "https://vercel.com/api/www/avatar"


class DirectoryClient:
    def __init__(
        self,
        access_token: str,
        base_url: str = "https://api.vercel.com",
        client: httpx.AsyncClient | None = None,
        timeout: float = 30.0,
    ):
        self.access_token = access_token
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = client

    async def _get_json(self, path: str) -> Any:
        url = f"{self.base_url}{path}"
        headers = {"Authorization": f"Bearer {self.access_token}"}
        if self._client is not None:
            response = await self._client.get(url, headers=headers, timeout=self.timeout)
        else:
            async with httpx.AsyncClient() as client:
                response = await client.get(url, headers=headers, timeout=self.timeout)
        response.raise_for_status()
        return response.json()

    async def fetch_user_info(self) -> UserInfo | None:
        try:
            data = await self._get_json("/v2/user")
            user = data.get("user") if isinstance(data, dict) else None
            if not user:
                return None
            return UserInfo(
                id=user["id"],
                name=user.get("name") or user["username"],
                avatar=f"{AVATAR_URL}?userId={user['id']}&s=64",
                default_team_id=user.get("defaultTeamId"),
            )
        except (httpx.HTTPError, ValueError, KeyError) as e:
            logger.warning(f"Failed to fetch user info: {e}")
            return None

    async def fetch_teams(self) -> list[Team]:
        try:
            data = await self._get_json("/v2/teams")
            raw_teams = (data.get("teams") if isinstance(data, dict) else None) or []
            return [
                Team(
                    id=team["id"],
                    name=team["name"],
                    slug=team.get("slug") or slugify(team["name"]),
                    avatar=f"{AVATAR_URL}?teamId={team['id']}&s=64",
                    is_personal=False,
                )
                for team in raw_teams
                if not team.get("limited")
            ]
        except (httpx.HTTPError, ValueError, KeyError) as e:
            logger.warning(f"Failed to fetch teams: {e}")
            return []

    async def list_teams(self) -> list[Team]:
        user, teams = await asyncio.gather(self.fetch_user_info(), self.fetch_teams())
        return merge_teams(user, teams)


def merge_teams(user: UserInfo | None, teams: list[Team]) -> list[Team]:
    """Personal account first, then teams sorted by name"""

    merged: list[Team] = []
    if user is not None:
        merged.append(
            Team(
                id=user.id,
                name=user.name,
                slug=slugify(user.name),
                avatar=user.avatar,
                is_personal=True,
            ),
        )
    merged.extend(sorted(teams, key=lambda team: locale_key(team.name)))
    return merged


async def get_teams(
    user_id: str | None,
    settings: Settings,
    linking: AccountLinkingService,
    client: httpx.AsyncClient | None = None,
) -> TeamsResponse:
    """Teams for an authenticated user with a linked provider account"""

    if not settings.ai_gateway_managed_keys_enabled:
        raise FeatureDisabledError

    if not user_id:
        raise NotAuthenticatedError

    account = await linking.get_linked_account(user_id, settings.linked_provider)
    if (
        account is None
        or not account.access_token
        or account.provider_id != settings.linked_provider
    ):
        raise NoLinkedAccountError(settings.linked_provider)

    directory = DirectoryClient(
        account.access_token,
        base_url=settings.directory_api_url,
        client=client,
        timeout=settings.http_timeout,
    )
    teams = await directory.list_teams()
    logger.info(f"Listed {len(teams)} teams for user {user_id}")
    return TeamsResponse(teams=teams)
