from typing import Literal, Optional

from ._base import ApiModel

ApiKeyModel = Literal["openai", "deepseek"]


class UserProfile(ApiModel):
    id: str
    email: Optional[str] = None
    display_name: Optional[str] = None
    avatar_url: Optional[str] = None


class MeResponse(ApiModel):
    user_id: str
    profile: Optional[UserProfile] = None


class ApiKeysResponse(ApiModel):
    api_key: Optional[str] = None
