from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class LinkedAccount(BaseModel):
    user_id: str
    provider_id: str
    access_token: str | None = None


class UserInfo(BaseModel):
    id: str
    name: str
    avatar: str
    default_team_id: str | None = None


class Team(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    name: str
    slug: str
    avatar: str | None = None
    is_personal: bool = False


class TeamsResponse(BaseModel):
    teams: list[Team]
