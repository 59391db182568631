from .models import AbstractCodeChunker, MethodCollapseSpec
from .base import code_chunker, chunk_file, chunk_files, create_chunker

__all__ = [
    "AbstractCodeChunker",
    "MethodCollapseSpec",
    "code_chunker",
    "chunk_file",
    "chunk_files",
    "create_chunker",
]
