import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import click

from codeskel.chunking import chunk_files
from codeskel.models import Chunk
from codeskel.parsers import SyntaxTreeProvider, UnsupportedFileError
from codeskel.settings import FallbackContent, JavaSettings, load_settings
from codeskel.logger import logger


def _setup_logging(debug: bool) -> None:
    # Ensure stdlib logger emits records so structlog output is visible
    level = logging.DEBUG if debug else logging.WARNING
    root = logging.getLogger()
    root.setLevel(level)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(level)
        # structlog renders the final message; keep stdlib formatter simple.
        handler.setFormatter(logging.Formatter("%(message)s"))
        root.addHandler(handler)
    else:
        for handler in root.handlers:
            handler.setLevel(level)


def _format_chunk(chunk: Chunk) -> str:
    label = chunk.method_identifier or chunk.class_name or "-"
    head = f"[{chunk.type.value}] {chunk.start_line}-{chunk.end_line} {label}"
    if chunk.method_identifier and chunk.class_name:
        head += f" ({chunk.class_name})"
    return f"{head}\n{chunk.content}\n"


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument(
    "files",
    nargs=-1,
    required=True,
    type=click.Path(
        exists=True, file_okay=True, dir_okay=False, readable=True, path_type=Path
    ),
)
@click.option(
    "--json/--text",
    "as_json",
    default=False,
    help="Print one JSON object per chunk instead of readable text.",
)
@click.option(
    "--fallback-content",
    type=click.Choice([m.value for m in FallbackContent]),
    default=None,
    help="Content of enum/annotation chunks (default: whole file).",
)
@click.option(
    "--env-prefix",
    type=str,
    default="CODESKEL_",
    show_default=True,
    help="Prefix of environment variables read into settings.",
)
@click.option(
    "--debug/--no-debug",
    default=False,
    help="Enable debug logging.",
)
def main(
    files: Tuple[Path, ...],
    as_json: bool,
    fallback_content: Optional[str],
    env_prefix: str,
    debug: bool,
) -> None:
    """
    Split Java source FILES into skeleton and method chunks and print them.
    """
    _setup_logging(debug)

    overrides = {}
    if fallback_content is not None:
        overrides["languages"] = {
            "java": JavaSettings(fallback_content=FallbackContent(fallback_content))
        }
    settings = load_settings(env_prefix=env_prefix, **overrides)
    provider = SyntaxTreeProvider(settings)

    try:
        results: Dict[str, List[Chunk]] = asyncio.run(
            chunk_files(files, provider=provider, settings=settings)
        )
    except UnsupportedFileError as e:
        raise click.ClickException(str(e))

    for path, chunks in results.items():
        logger.debug("Chunked file", path=path, chunks=len(chunks))
        for chunk in chunks:
            if as_json:
                click.echo(json.dumps({"path": path, **chunk.to_dict()}))
            else:
                click.echo(_format_chunk(chunk))


if __name__ == "__main__":
    main()
