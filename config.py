from enum import Enum

from pydantic_settings import BaseSettings, SettingsConfigDict


class Env(Enum):
    local = "local"
    dev = "dev"
    prod = "prod"


class Router(Enum):
    starlette = "starlette"
    werkzeug = "werkzeug"
    stdlib = "stdlib"


class Config(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="RECIPES_")

    env: Env = Env.local
    router: Router = Router.starlette
    host: str = "127.0.0.1"
    port: int = 8080
    log_level: str = "INFO"
    # Adding an existing id replaces it instead of failing.
    allow_overwrite: bool = False
