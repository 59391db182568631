import asyncio
from pathlib import Path
from typing import AsyncIterator, Dict, Iterable, List, Optional

from codeskel.models import Chunk, ProgrammingLanguage
from codeskel.parsers import LanguageRegistry, SyntaxTreeProvider
from codeskel.settings import ChunkerSettings
from codeskel.logger import logger
from .models import AbstractCodeChunker


def create_chunker(
    language: ProgrammingLanguage,
    settings: Optional[ChunkerSettings] = None,
) -> AbstractCodeChunker:
    """
    Factory to construct a code chunker.

    Parameters
    ----------
    language : Language whose registered chunker should be built.
    settings : Chunker settings; defaults are used when omitted.

    Returns
    -------
    An instance of an AbstractCodeChunker.
    """
    support_cls = LanguageRegistry.get(language)
    if support_cls is None:
        raise ValueError(f"Unknown chunker language: {language}")
    return support_cls().create_chunker(settings or ChunkerSettings())


async def code_chunker(
    filepath: str,
    contents: str,
    *,
    provider: Optional[SyntaxTreeProvider] = None,
    settings: Optional[ChunkerSettings] = None,
) -> AsyncIterator[Chunk]:
    """
    Lazily chunk *contents* of the file at *filepath*.

    Blank input yields nothing. A path without a grammar raises
    `UnsupportedFileError` before any chunk is produced.
    """
    if not contents.strip():
        return

    if settings is None:
        settings = provider.settings if provider is not None else ChunkerSettings()
    if provider is None:
        provider = SyntaxTreeProvider(settings)

    tree = await provider.get_tree_for(filepath, contents)
    chunker = create_chunker(provider.get_language(filepath), settings)
    logger.debug("Chunking file", path=filepath)

    source = contents.encode("utf-8")
    for chunk, class_name in chunker.iter_owned_chunks(tree.root_node, source):
        if settings.attach_class_names and class_name is not None:
            chunk = chunk.model_copy(update={"class_name": class_name})
        yield chunk


async def chunk_file(
    path: str | Path,
    *,
    provider: Optional[SyntaxTreeProvider] = None,
    settings: Optional[ChunkerSettings] = None,
) -> List[Chunk]:
    """
    Read *path* as UTF-8 and return all of its chunks.
    """
    contents = Path(path).read_text(encoding="utf-8")
    return [
        chunk
        async for chunk in code_chunker(
            str(path), contents, provider=provider, settings=settings
        )
    ]


async def chunk_files(
    paths: Iterable[str | Path],
    *,
    provider: Optional[SyntaxTreeProvider] = None,
    settings: Optional[ChunkerSettings] = None,
) -> Dict[str, List[Chunk]]:
    """
    Chunk independent files concurrently. The first failure propagates.
    """
    settings = settings or (provider.settings if provider else ChunkerSettings())
    provider = provider or SyntaxTreeProvider(settings)
    keys = [str(p) for p in paths]
    results = await asyncio.gather(
        *(chunk_file(p, provider=provider, settings=settings) for p in keys)
    )
    return dict(zip(keys, results))
