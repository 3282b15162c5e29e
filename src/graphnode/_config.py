import os
from os import environ as env
from typing import Literal, Optional

from dotenv import load_dotenv
from pydantic import BaseModel

from ._utils.constants import (
    DEFAULT_BASE_URL,
    DOTENV_FILE,
    ENV_ACCESS_TOKEN,
    ENV_BASE_URL,
)


class Config(BaseModel):
    base_url: str = DEFAULT_BASE_URL
    access_token: Optional[str] = None
    credentials: Literal["include", "omit", "same-origin"] = "include"
    timeout: float = 30.0
    max_attempts: int = 3


def load_environment_variables() -> None:
    load_dotenv(dotenv_path=os.path.join(os.getcwd(), DOTENV_FILE), override=False)


def resolve_config(
    base_url: Optional[str] = None,
    access_token: Optional[str] = None,
    **overrides,
) -> Config:
    """Build a :class:`Config` from explicit values and the environment.

    Explicit arguments win over ``GRAPHNODE_BASE_URL`` and
    ``GRAPHNODE_ACCESS_TOKEN``, which are read after loading ``.env`` from the
    working directory. The base URL falls back to the production API.
    """
    load_environment_variables()

    base_url_value = base_url or env.get(ENV_BASE_URL) or DEFAULT_BASE_URL
    access_token_value = access_token or env.get(ENV_ACCESS_TOKEN)

    return Config(
        base_url=base_url_value.rstrip("/"),
        access_token=access_token_value,
        **overrides,
    )
