import pytest

from codeskel.models import ProgrammingLanguage
from codeskel.parsers import (
    LanguageRegistry,
    ParserCache,
    SyntaxTreeProvider,
    UnsupportedFileError,
)
from codeskel.settings import ChunkerSettings, JavaSettings, LanguageSettings
from codeskel.lang.java import JavaLanguageSupport


def test_java_is_registered():
    assert LanguageRegistry.get(ProgrammingLanguage.JAVA) is JavaLanguageSupport
    assert ProgrammingLanguage.JAVA in LanguageRegistry.get_languages()


@pytest.mark.parametrize(
    "path, expected",
    [
        ("Foo.java", ProgrammingLanguage.JAVA),
        ("src/main/java/com/Foo.JAVA", ProgrammingLanguage.JAVA),
        ("Foo.kt", None),
        ("Makefile", None),
    ],
)
def test_language_for_path(path, expected):
    assert LanguageRegistry.language_for_path(path) == expected


def test_extra_extensions_from_settings():
    settings = ChunkerSettings(
        languages={"java": JavaSettings(extra_extensions=[".jav"])}
    )
    assert LanguageRegistry.language_for_path("Foo.jav", settings) == ProgrammingLanguage.JAVA
    assert LanguageRegistry.language_for_path("Foo.jav") is None


@pytest.mark.asyncio
async def test_provider_returns_tree():
    provider = SyntaxTreeProvider()
    tree = await provider.get_tree_for("A.java", "package p;\nclass A {}\n")

    root = tree.root_node
    assert root.parent is None
    assert [c.type for c in root.children] == ["package_declaration", "class_declaration"]


@pytest.mark.asyncio
async def test_provider_uses_extra_extensions():
    settings = ChunkerSettings(
        languages={"java": LanguageSettings(extra_extensions=[".jsh"])}
    )
    provider = SyntaxTreeProvider(settings)
    tree = await provider.get_tree_for("snippet.jsh", "class A {}\n")

    assert tree.root_node.children[0].type == "class_declaration"


@pytest.mark.asyncio
async def test_provider_rejects_unknown_files():
    provider = SyntaxTreeProvider()
    with pytest.raises(UnsupportedFileError) as exc_info:
        await provider.get_tree_for("notes.md", "# hello")

    assert exc_info.value.path == "notes.md"
    assert isinstance(exc_info.value, ValueError)
    assert len(provider.cache) == 0


def test_parser_cache_reuses_parsers():
    cache = ParserCache()
    first = cache.get(ProgrammingLanguage.JAVA)
    second = cache.get(ProgrammingLanguage.JAVA)

    assert first is second
    assert ProgrammingLanguage.JAVA in cache
    assert len(cache) == 1


def test_parser_cache_invalidate_language():
    cache = ParserCache()
    first = cache.get(ProgrammingLanguage.JAVA)

    cache.invalidate(ProgrammingLanguage.JAVA)
    assert ProgrammingLanguage.JAVA not in cache
    assert cache.get(ProgrammingLanguage.JAVA) is not first


def test_parser_cache_invalidate_all():
    cache = ParserCache()
    cache.get(ProgrammingLanguage.JAVA)

    cache.invalidate()
    assert len(cache) == 0


def test_parser_cache_rejects_unregistered_language():
    with pytest.raises(ValueError):
        ParserCache().get("cobol")


@pytest.mark.asyncio
async def test_provider_shares_parser_across_paths():
    provider = SyntaxTreeProvider()
    await provider.get_tree_for("A.java", "class A {}\n")
    await provider.get_tree_for("pkg/B.java", "class B {}\n")

    assert len(provider.cache) == 1


def test_provider_get_language():
    provider = SyntaxTreeProvider()

    assert provider.get_language("A.java") == ProgrammingLanguage.JAVA
    with pytest.raises(UnsupportedFileError):
        provider.get_language("a.py")
