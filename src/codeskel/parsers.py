import inspect
import os
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Type, TYPE_CHECKING

import tree_sitter as ts

from codeskel.models import ProgrammingLanguage
from codeskel.settings import ChunkerSettings
from codeskel.logger import logger

if TYPE_CHECKING:
    from codeskel.chunking.models import AbstractCodeChunker


class UnsupportedFileError(ValueError):
    """Raised when no grammar is available for a file path."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Failed to load parser for file {path}")
        self.path = path


# Abstract base language support class
class AbstractLanguageSupport(ABC):
    """
    Binds a programming language to its tree-sitter grammar and chunker.
    Concrete subclasses register themselves on definition.
    """

    language: ProgrammingLanguage
    extensions: List[str]

    def __init_subclass__(cls, **kw):
        super().__init_subclass__(**kw)
        if not inspect.isabstract(cls):
            if not hasattr(cls, "extensions") or not cls.extensions:
                raise ValueError(f"{cls.__name__} missing `extensions`")
            LanguageRegistry.register(cls)

    @abstractmethod
    def load_language(self) -> ts.Language:
        """
        Load the tree-sitter grammar. Called at most once per parser cache.
        """
        ...

    @abstractmethod
    def create_chunker(self, settings: ChunkerSettings) -> "AbstractCodeChunker": ...


class LanguageRegistry:
    """
    Singleton registry mapping languages and file extensions to language support.
    """

    _instance = None
    _supports: Dict[ProgrammingLanguage, Type[AbstractLanguageSupport]] = {}

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(LanguageRegistry, cls).__new__(cls)
        return cls._instance

    @classmethod
    def register(cls, support: Type[AbstractLanguageSupport]) -> None:
        cls._supports[support.language] = support

    @classmethod
    def get(cls, lang: ProgrammingLanguage) -> Optional[Type[AbstractLanguageSupport]]:
        return cls._supports.get(lang)

    @classmethod
    def get_languages(cls) -> List[ProgrammingLanguage]:
        return list(cls._supports)

    @classmethod
    def language_for_path(
        cls, path: str, settings: Optional[ChunkerSettings] = None
    ) -> Optional[ProgrammingLanguage]:
        ext = os.path.splitext(path)[1].lower()
        if not ext:
            return None
        for lang, support in cls._supports.items():
            extensions = [e.lower() for e in support.extensions]
            if settings is not None:
                lang_settings = settings.languages.get(lang.value)
                if lang_settings is not None:
                    extensions.extend(e.lower() for e in lang_settings.extra_extensions)
            if ext in extensions:
                return lang
        return None


class ParserCache:
    """
    Parsers keyed by language. A grammar is loaded on first use and kept
    until invalidated.
    """

    def __init__(self) -> None:
        self._parsers: dict[ProgrammingLanguage, ts.Parser] = {}

    def get(self, lang: ProgrammingLanguage) -> ts.Parser:
        parser = self._parsers.get(lang)
        if parser is None:
            support_cls = LanguageRegistry.get(lang)
            if support_cls is None:
                raise ValueError(f"No grammar registered for language: {lang}")
            logger.debug("Loading grammar", language=lang.value)
            parser = ts.Parser(support_cls().load_language())
            self._parsers[lang] = parser
        return parser

    def invalidate(self, lang: Optional[ProgrammingLanguage] = None) -> None:
        """
        Drop the parser for *lang*, or every parser when no language is given.
        """
        if lang is None:
            self._parsers.clear()
            return
        self._parsers.pop(lang, None)

    def __contains__(self, lang: ProgrammingLanguage) -> bool:
        return lang in self._parsers

    def __len__(self) -> int:
        return len(self._parsers)


class SyntaxTreeProvider:
    """
    Turns file text into a tree-sitter tree, selecting the grammar by path.
    """

    def __init__(
        self,
        settings: Optional[ChunkerSettings] = None,
        cache: Optional[ParserCache] = None,
    ) -> None:
        self.settings = settings or ChunkerSettings()
        self.cache = cache if cache is not None else ParserCache()

    def get_language(self, path: str) -> ProgrammingLanguage:
        lang = LanguageRegistry.language_for_path(path, self.settings)
        if lang is None:
            logger.warning("No grammar available for file", path=path)
            raise UnsupportedFileError(path)
        return lang

    async def get_tree_for(self, path: str, text: str) -> ts.Tree:
        parser = self.cache.get(self.get_language(path))
        return parser.parse(text.encode("utf-8"))


# Helpers
def get_node_text(node) -> str:
    """
    Get text of the tree sitter node
    """
    if not node or not node.text:
        return ""

    return node.text.decode("utf-8")
