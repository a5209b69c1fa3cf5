# config.py

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from estimator.errors import ConfigurationError

DEFAULT_MODEL = "gpt-4o-mini"

TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    api_key: str
    secret_key: str
    model: str = DEFAULT_MODEL
    base_url: str | None = None
    session_file_dir: str = "./flask_session"
    debug_mode: bool = False


def load_settings() -> Settings:
    """
    Reads configuration from the environment (and .env, if present).
    Raises ConfigurationError when a required value is missing, so the
    application refuses to start instead of failing on the first request.
    """

    load_dotenv()

    api_key = os.getenv("OPENAI_API_KEY") or os.getenv("API_KEY")
    if not api_key:
        raise ConfigurationError("OPENAI_API_KEY environment variable is not set")

    secret_key = os.getenv("SECRET_KEY")
    if not secret_key:
        raise ConfigurationError("SECRET_KEY is not set in environment variables")

    return Settings(
        api_key=api_key,
        secret_key=secret_key,
        model=os.getenv("OPENAI_MODEL", DEFAULT_MODEL),
        base_url=os.getenv("OPENAI_BASE_URL") or None,
        session_file_dir=os.getenv("SESSION_FILE_DIR", "./flask_session"),
        debug_mode=os.getenv("DEBUG_MODE", "").strip().lower() in TRUTHY,
    )
