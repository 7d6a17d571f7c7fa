"""Localization infrastructure settings."""

from pydantic import Field, field_validator

from infrastructure.configuration.base import InfrastructureSettings


class I18nSettings(InfrastructureSettings):
    """Translation engine configuration.

    Environment Variables:
        I18N_TRANSLATIONS_DIR: Directory holding one JSON file per locale,
            relative to the working directory (default: i18n)
        I18N_LANGUAGE: Language requested at startup, or "System" to follow
            the host UI culture (default: System)
        I18N_BASELINE_LOCALE: Locale rendered without a table (default: en-US)
        I18N_BUNDLED_LOCALE: Locale shipped inside the package (default: zh-CN)

    Example:
        ```python
        from infrastructure.configuration import settings

        translations_dir = settings.i18n.translations_dir
        language = settings.i18n.language
        ```
    """

    translations_dir: str = Field(
        default="i18n",
        alias="I18N_TRANSLATIONS_DIR",
        description="Directory scanned for on-disk translation files",
    )
    language: str = Field(
        default="System",
        alias="I18N_LANGUAGE",
        description="Locale code requested when the store is created",
    )
    baseline_locale: str = Field(
        default="en-US",
        alias="I18N_BASELINE_LOCALE",
        description="Locale whose table is the identity translation",
    )
    bundled_locale: str = Field(
        default="zh-CN",
        alias="I18N_BUNDLED_LOCALE",
        description="Locale compiled into the package as a resource",
    )

    @field_validator("language", "baseline_locale", "bundled_locale")
    @classmethod
    def validate_locale_code(cls, v: str) -> str:
        """Strip surrounding whitespace and reject blank locale codes."""
        v = v.strip()
        if not v:
            raise ValueError("locale code must not be empty")
        return v
