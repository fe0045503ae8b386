"""Localization catalog settings."""

from pathlib import Path
from typing import Any, Optional

from pydantic import Field, field_validator

from localization.configuration.base import ComponentSettings

DEFAULT_RESOURCE_DIR = "localizations"
DEFAULT_LANGUAGE = "en_US"


class LocalizationSettings(ComponentSettings):
    """Where catalogs live and which language is the fallback.

    Environment Variables:
        TRANSLATION_DIR: Root directory holding one sub-directory per language
            (default: the `localizations` directory of the working directory)
        DEFAULT_LANG: Language used when a requested one is not available
            (default: en_US)
        LOCALIZATION_USE_ISOLATING: Wrap placeables in Unicode isolation marks
            (default: False)

    Example:
        ```python
        from localization.configuration import get_settings

        settings = get_settings()
        root = settings.localization.base_path
        ```
    """

    TRANSLATION_DIR: Optional[Path] = Field(
        default=None,
        alias="TRANSLATION_DIR",
        description="Root directory of the localization catalogs",
    )
    DEFAULT_LANG: str = Field(
        default=DEFAULT_LANGUAGE,
        alias="DEFAULT_LANG",
        description="Language identifier of the fallback language",
    )
    USE_ISOLATING: bool = Field(
        default=False,
        alias="LOCALIZATION_USE_ISOLATING",
        description="Wrap interpolated values in Unicode isolation marks",
    )

    @field_validator("TRANSLATION_DIR", mode="before")
    @classmethod
    def validate_translation_dir(cls, v: Any) -> Any:
        """Treat an empty TRANSLATION_DIR as unset."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @property
    def base_path(self) -> Path:
        """Resolved catalog root directory.

        Returns:
            TRANSLATION_DIR if configured, otherwise `<cwd>/localizations`.
        """
        if self.TRANSLATION_DIR is not None:
            return Path(self.TRANSLATION_DIR)
        return Path.cwd() / DEFAULT_RESOURCE_DIR
