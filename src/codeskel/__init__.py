from codeskel.models import Chunk, ChunkType, ProgrammingLanguage
from codeskel.settings import ChunkerSettings, JavaSettings, FallbackContent, load_settings
from codeskel.parsers import SyntaxTreeProvider, ParserCache, UnsupportedFileError
from codeskel import lang  # noqa: F401  registers language support
from codeskel.chunking import code_chunker, chunk_file, chunk_files, create_chunker
from codeskel.naming import resolve_qualified_name

__all__ = [
    "Chunk",
    "ChunkType",
    "ProgrammingLanguage",
    "ChunkerSettings",
    "JavaSettings",
    "FallbackContent",
    "load_settings",
    "SyntaxTreeProvider",
    "ParserCache",
    "UnsupportedFileError",
    "code_chunker",
    "chunk_file",
    "chunk_files",
    "create_chunker",
    "resolve_qualified_name",
]
