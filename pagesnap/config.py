from enum import Enum
from functools import lru_cache

from pydantic import Field, PositiveInt
from pydantic_settings import BaseSettings, SettingsConfigDict
from rich.console import Console

DEFAULT_WIDTH = 2560
DEFAULT_HEIGHT = 1600


class Engine(str, Enum):
    pyppeteer = "pyppeteer"
    playwright = "playwright"


class Config(BaseSettings):
    # Viewport used when no size token is given
    default_width: PositiveInt = DEFAULT_WIDTH
    default_height: PositiveInt = DEFAULT_HEIGHT

    # Browser
    engine: Engine = Engine.pyppeteer
    headless: bool = True
    browser_args: list[str] = Field(default_factory=lambda: ["--no-sandbox"])

    model_config = SettingsConfigDict(
        env_prefix="PAGESNAP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def console(self):
        return Console()


@lru_cache()
def get_config() -> Config:
    """Get cached config instance."""

    return Config()
