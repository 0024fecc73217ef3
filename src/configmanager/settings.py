"""
Process-environment settings for configmanager, via pydantic-settings.

Only one variable is read:

    CONFIG_MANAGER_ENV=staging   # selects app.staging.json etc.

An empty value is treated the same as an unset one.
"""

import pydantic as _pydantic
import pydantic_settings as _pydantic_settings

import configmanager.constants as constants


class ManagerSettings(_pydantic_settings.BaseSettings):
    """Settings read from the process environment."""

    model_config = _pydantic_settings.SettingsConfigDict(
        extra="ignore",
        case_sensitive=True,
    )

    env: str | None = _pydantic.Field(
        default=None,
        description="Active configuration environment",
        validation_alias=constants.ENV_KEY,
    )

    @_pydantic.field_validator("env", mode="before")
    @classmethod
    def _blank_is_unset(cls, value: object) -> object:
        """Treat an empty or whitespace-only value as unset."""
        if isinstance(value, str) and not value.strip():
            return None
        return value
