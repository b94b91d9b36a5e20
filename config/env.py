"""Environment bootstrap module.

Importing this module will load environment variables from a .env file
so that lower layers don't need to call load_dotenv themselves.
"""

import os

from dotenv import load_dotenv as _load_dotenv

# Load environment variables from .env if present
_load_dotenv()

DEFAULT_OPENAI_MODEL = "gpt-4o-mini"
DEFAULT_MIN_PASSWORD_LENGTH = 8


def get_openai_api_key():
    return os.getenv("OPENAI_API_KEY")


def get_openai_model() -> str:
    return os.getenv("OPENAI_MODEL", DEFAULT_OPENAI_MODEL)


def get_frontend_url() -> str:
    return os.getenv("FRONTEND_URL", "http://localhost:3000")


def get_min_password_length() -> int:
    value = os.getenv("MIN_PASSWORD_LENGTH")
    if value is None or not value.strip():
        return DEFAULT_MIN_PASSWORD_LENGTH
    try:
        length = int(value)
    except ValueError:
        raise ValueError(f"MIN_PASSWORD_LENGTH must be an integer, got {value!r}") from None
    if length < 0:
        raise ValueError(f"MIN_PASSWORD_LENGTH must not be negative, got {length}")
    return length


def get_log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()


def validate_settings() -> None:
    """Raise ValueError for settings that would otherwise fail per request"""
    get_min_password_length()
