"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use STYLOG_ prefix (e.g., STYLOG_FORMAT_COLORS=false).

Settings can also be loaded from a .env file in the project root.
"""

from typing import Any, Dict, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use STYLOG_ prefix.

    Examples:
        STYLOG_FORMAT_COLORS=false
        STYLOG_GROUP_INDENTATION=4
        STYLOG_CSS_PLACEHOLDER=%c
    """

    model_config = SettingsConfigDict(
        env_prefix="STYLOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Statement configuration
    css_placeholder: str = Field(
        default="%c",
        description="Token injected in front of a statement that carries CSS declarations",
    )

    declaration_separator: str = Field(
        default="; ",
        description="Separator used to join CSS declarations and declaration groups",
    )

    # Formatting configuration
    format_colors: bool = Field(
        default=True,
        description="Enable color-aware formatting in the default format options",
    )

    inspect_background: Literal["dark", "light"] = Field(
        default="dark",
        description="Terminal background assumed when highlighting inspected values",
    )

    # Sink configuration
    group_indentation: int = Field(
        default=2,
        ge=0,
        description="Spaces added to the indentation by each open group",
    )

    debug_mode: bool = Field(
        default=False,
        description="Log flush diagnostics regardless of the connected verbosity",
    )

    def formatOptions_default(self) -> Dict[str, Any]:
        """
        Build the default format options object.

        Returns:
            A new dict built from the current settings. The builder keeps
            one shared, read-only view of it as DEFAULT_FORMAT_OPTIONS

        Example:
            >>> AppSettings().formatOptions_default()
            {'colors': True}
        """
        return {"colors": self.format_colors}


# Singleton instance - import this in your code
appsettings = AppSettings()
