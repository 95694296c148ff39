"""Scraper configuration loaded from the environment."""

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from htmlscraper.binder import Mode

MODE_ENV = 'HTMLSCRAPER_MODE'
PARSER_ENV = 'HTMLSCRAPER_PARSER'
DEFAULT_PARSER = 'lxml'


class ScraperConfig(BaseModel):
    """Configuration for a Scraper.

    Attributes:
        mode: Failure tolerance policy. Defaults to strict.
        parser: BeautifulSoup tree builder used when a Scraper is given markup strings. Defaults to 'lxml'.

    """

    mode: Mode = Field(default=Mode.STRICT, description='strict, tolerant or silent')
    parser: str = Field(default=DEFAULT_PARSER, description='BeautifulSoup parser')


def load_config(env_file: str | Path | None = None) -> ScraperConfig:
    """Load configuration from environment variables (and a .env file).

    Args:
        env_file: Path to a .env file. Defaults to None (dotenv searches for one).

    Returns:
        ScraperConfig built from HTMLSCRAPER_MODE and HTMLSCRAPER_PARSER.

    Raises:
        pydantic.ValidationError: If a value is invalid.

    """
    load_dotenv(env_file)

    values: dict[str, str] = {}
    mode = os.getenv(MODE_ENV)
    if mode:
        values['mode'] = mode.strip().lower()
    parser = os.getenv(PARSER_ENV)
    if parser:
        values['parser'] = parser.strip()
    return ScraperConfig(**values)
