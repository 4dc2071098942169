from enum import Enum

from pydantic_settings import BaseSettings


class Env(Enum):
    local = "local"
    dev = "dev"
    prod = "prod"


class Config(BaseSettings):
    env: Env = Env.local
    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "INFO"
    generation_delay: float = 1.5
    generation_timeout: float | None = None
    max_ingredients: int = 10
