from typing import Callable, Dict, Iterator, Optional

import tree_sitter as ts
import tree_sitter_java as tsjava

from codeskel.chunking.collapse import (
    collapse_type,
    find_method_body,
    get_method_identifier,
    is_method,
    iter_members,
)
from codeskel.chunking.models import AbstractCodeChunker, OwnedChunk
from codeskel.consts import (
    JAVA_ANNOTATION,
    JAVA_CLASS,
    JAVA_ENUM,
    JAVA_INTERFACE,
    JAVA_RECORD,
)
from codeskel.models import Chunk, ChunkType, ProgrammingLanguage
from codeskel.naming import resolve_full_name
from codeskel.parsers import AbstractLanguageSupport, get_node_text
from codeskel.settings import ChunkerSettings, FallbackContent, JavaSettings
from codeskel.logger import logger


class JavaCodeChunker(AbstractCodeChunker):
    """
    Splits a Java file into one skeleton chunk per top-level type followed by
    one chunk per multi-line method or constructor.
    """

    def __init__(self, settings: Optional[JavaSettings] = None) -> None:
        self.settings = settings or JavaSettings()
        # Top-level node-type -> handler mapping
        self._handlers: Dict[
            str, Callable[[ts.Node, bytes], Iterator[OwnedChunk]]
        ] = {
            JAVA_CLASS: self._handle_type,
            JAVA_INTERFACE: self._handle_type,
            JAVA_RECORD: self._handle_type,
            JAVA_ENUM: self._handle_fallback,
            JAVA_ANNOTATION: self._handle_fallback,
        }

    def iter_owned_chunks(self, root: ts.Node, source: bytes) -> Iterator[OwnedChunk]:
        for child in root.children:
            handler = self._handlers.get(child.type)
            if handler is None:
                logger.debug(
                    "Ignoring top-level node",
                    node_type=child.type,
                    line=child.start_point[0] + 1,
                )
                continue
            yield from handler(child, source)

    # Handlers
    def _handle_type(self, node: ts.Node, source: bytes) -> Iterator[OwnedChunk]:
        class_name = resolve_full_name(node)
        yield self._skeleton_chunk(node, source), class_name
        yield from self._iter_method_chunks(node, class_name)

    def _handle_fallback(self, node: ts.Node, source: bytes) -> Iterator[OwnedChunk]:
        if self.settings.fallback_content == FallbackContent.DECLARATION:
            content = (
                source[: node.start_byte].decode("utf-8") + get_node_text(node)
            )
        else:
            content = source.decode("utf-8")
        chunk = Chunk(
            content=content,
            start_line=node.start_point[0],
            end_line=node.end_point[0],
            type=ChunkType.CLASS_DEFINITION,
        )
        yield chunk, resolve_full_name(node)

    # Utilities
    def _skeleton_chunk(self, node: ts.Node, source: bytes) -> Chunk:
        header = source[: node.start_byte].decode("utf-8")
        return Chunk(
            content=header + collapse_type(node, source),
            start_line=0,
            end_line=node.end_point[0],
            type=ChunkType.CLASS_DEFINITION,
        )

    @staticmethod
    def _is_single_line(method_node: ts.Node) -> bool:
        """
        True when the method body opens and closes on the same row. Methods
        without a body are judged by their own rows.
        """
        span = find_method_body(method_node) or method_node
        return span.start_point[0] == span.end_point[0]

    def _iter_method_chunks(
        self, node: ts.Node, class_name: Optional[str]
    ) -> Iterator[OwnedChunk]:
        for member in iter_members(node):
            if not is_method(member):
                # nested type: names resolve top-down from the enclosing type
                yield from self._iter_method_chunks(
                    member, resolve_full_name(member, class_name)
                )
                continue

            if self._is_single_line(member):
                continue
            start_row, end_row = member.start_point[0], member.end_point[0]
            chunk = Chunk(
                content=get_node_text(member),
                start_line=start_row,
                end_line=end_row,
                method_identifier=get_method_identifier(member),
                type=ChunkType.METHOD_DEFINITION,
            )
            yield chunk, class_name


class JavaLanguageSupport(AbstractLanguageSupport):
    language = ProgrammingLanguage.JAVA
    extensions = [".java"]

    def load_language(self) -> ts.Language:
        return ts.Language(tsjava.language())

    def create_chunker(self, settings: ChunkerSettings) -> JavaCodeChunker:
        lang_settings = settings.get_language(self.language.value, JavaSettings())
        if not isinstance(lang_settings, JavaSettings):
            logger.warning(
                "Java language settings are not of the correct type, using defaults.",
                actual_type=type(lang_settings).__name__,
            )
            lang_settings = JavaSettings()
        return JavaCodeChunker(lang_settings)
