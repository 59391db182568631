from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class FallbackContent(str, Enum):
    """What an enum or annotation declaration chunk contains."""

    FILE = "file"
    DECLARATION = "declaration"


class LanguageSettings(BaseModel):
    """Base class for language-specific settings."""

    extra_extensions: List[str] = Field(
        default_factory=list,
        description="A list of additional file extensions to be associated with this language.",
    )


class JavaSettings(LanguageSettings):
    """Settings specific to the Java chunker."""

    fallback_content: FallbackContent = Field(
        default=FallbackContent.FILE,
        description=(
            "Content of the single chunk emitted for enum and annotation declarations: "
            '"file" uses the whole source file, "declaration" uses the file header '
            "followed by the declaration text."
        ),
    )


# Settings model for each language key; unknown keys use LanguageSettings.
LANGUAGE_SETTINGS_TYPES: dict[str, type[LanguageSettings]] = {"java": JavaSettings}


def _get_default_languages() -> dict[str, LanguageSettings]:
    return {"java": JavaSettings()}


class ChunkerSettings(BaseSettings):
    """Top-level settings for chunking."""

    attach_class_names: bool = Field(
        default=True,
        description=(
            "If True, every emitted chunk carries the qualified name of the type "
            "that owns it."
        ),
    )
    languages: dict[str, LanguageSettings] = Field(
        default_factory=_get_default_languages,
        description="A dictionary of language-specific settings, keyed by language name.",
    )

    @field_validator("languages", mode="before")
    @classmethod
    def _typed_languages(cls, value):
        # env, toml and json sources deliver plain dicts
        if not isinstance(value, dict):
            return value
        return {
            name: (
                LANGUAGE_SETTINGS_TYPES.get(name, LanguageSettings).model_validate(raw)
                if isinstance(raw, dict)
                else raw
            )
            for name, raw in value.items()
        }

    def get_language(self, name: str, default: LanguageSettings) -> LanguageSettings:
        return self.languages.get(name, default)


def load_settings(
    env_prefix: Optional[str] = None,
    env_file: Optional[str] = None,
    toml_file: Optional[str] = None,
    json_file: Optional[str] = None,
    **kwargs,
) -> ChunkerSettings:
    config_dict = SettingsConfigDict(
        env_prefix=env_prefix or "",
        env_file=env_file,
        toml_file=toml_file,
        json_file=json_file,
        env_nested_delimiter="__",
    )

    class Settings(ChunkerSettings):
        model_config = config_dict

    return Settings(**kwargs)
