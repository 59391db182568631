import pytest
from pydantic import ValidationError

from codeskel.lang.java import JavaCodeChunker, JavaLanguageSupport
from codeskel.models import Chunk, ChunkType
from codeskel.settings import (
    ChunkerSettings,
    FallbackContent,
    JavaSettings,
    LanguageSettings,
    load_settings,
)


def test_defaults():
    settings = ChunkerSettings()

    assert settings.attach_class_names is True
    java = settings.languages["java"]
    assert isinstance(java, JavaSettings)
    assert java.fallback_content == FallbackContent.FILE
    assert java.extra_extensions == []


def test_load_settings_reads_prefixed_env(monkeypatch):
    monkeypatch.setenv("CODESKEL_ATTACH_CLASS_NAMES", "false")

    assert load_settings(env_prefix="CODESKEL_").attach_class_names is False
    assert load_settings(env_prefix="OTHER_").attach_class_names is True


def test_load_settings_reads_nested_java_env(monkeypatch):
    monkeypatch.setenv("CODESKEL_LANGUAGES__JAVA__FALLBACK_CONTENT", "declaration")

    settings = load_settings(env_prefix="CODESKEL_")
    java = settings.languages["java"]

    assert isinstance(java, JavaSettings)
    assert java.fallback_content == FallbackContent.DECLARATION
    chunker = JavaLanguageSupport().create_chunker(settings)
    assert chunker.settings.fallback_content == FallbackContent.DECLARATION


def test_plain_dict_languages_are_typed():
    settings = ChunkerSettings(
        languages={"java": {"fallback_content": "declaration"}, "kotlin": {}}
    )

    assert isinstance(settings.languages["java"], JavaSettings)
    assert type(settings.languages["kotlin"]) is LanguageSettings


def test_load_settings_kwargs_override():
    settings = load_settings(
        languages={"java": JavaSettings(fallback_content=FallbackContent.DECLARATION)}
    )
    chunker = JavaLanguageSupport().create_chunker(settings)

    assert isinstance(chunker, JavaCodeChunker)
    assert chunker.settings.fallback_content == FallbackContent.DECLARATION


def test_invalid_fallback_content():
    with pytest.raises(ValidationError):
        JavaSettings(fallback_content="everything")


def test_generic_language_settings_fall_back_to_defaults():
    settings = ChunkerSettings(languages={"java": LanguageSettings()})
    chunker = JavaLanguageSupport().create_chunker(settings)

    assert chunker.settings == JavaSettings()


def test_chunk_is_frozen_and_serializes():
    chunk = Chunk(
        content="void m() {\n}",
        start_line=3,
        end_line=4,
        type=ChunkType.METHOD_DEFINITION,
        method_identifier="m[3-4]",
    )
    with pytest.raises(ValidationError):
        chunk.content = "changed"

    assert chunk.to_dict() == {
        "content": "void m() {\n}",
        "startLine": 3,
        "endLine": 4,
        "type": "method_definition",
        "methodIdentifier": "m[3-4]",
        "className": None,
    }
