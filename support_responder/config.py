"""
Responder Configuration

This module provides configuration for the support responder using
Pydantic v2 settings. Every field can be overridden through environment
variables prefixed with ``SUPPORT_RESPONDER_`` or through a ``.env`` file.
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_RESPONSES_FILE = "default.txt"
FALLBACK_RESPONSE = "Could you elaborate on that?"


class ResponderConfig(BaseSettings):
    """Configuration for the response generator and the support console."""

    model_config = SettingsConfigDict(
        env_prefix="SUPPORT_RESPONDER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Default responses
    default_responses_path: str = Field(
        default=DEFAULT_RESPONSES_FILE,
        description="Default responses file, relative to the working directory"
    )
    fallback_response: str = Field(
        default=FALLBACK_RESPONSE,
        description="Response used when no default responses could be loaded"
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Logging level"
    )
    log_format: Literal["json", "console"] = Field(
        default="console",
        description="Log renderer"
    )

    # Support console
    greeting: str = Field(
        default="Welcome to the DodgySoft Technical Support System.\n"
                "Please tell us about your problem.\n"
                "We will assist you with any problem you might have.\n"
                "Please type 'bye' to exit our system.",
        description="Text printed when a support session starts"
    )
    farewell: str = Field(
        default="Nice talking to you. Bye...",
        description="Text printed when a support session ends"
    )
    exit_word: str = Field(
        default="bye",
        description="Word that ends a support session"
    )

    @field_validator("fallback_response", "exit_word")
    @classmethod
    def validate_not_blank(cls, v):
        if not v or not v.strip():
            raise ValueError("must not be blank")
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator("exit_word")
    @classmethod
    def normalize_exit_word(cls, v):
        return v.strip().lower()


def load_config(**overrides) -> ResponderConfig:
    """
    Load the responder configuration.

    Args:
        **overrides: Field values that take precedence over the environment

    Returns:
        Validated configuration object

    Raises:
        pydantic.ValidationError: If a value from the environment or the
            overrides is invalid
    """
    return ResponderConfig(**overrides)
