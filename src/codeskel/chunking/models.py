from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

import tree_sitter as ts

from codeskel.models import Chunk


# Splice instruction
@dataclass(frozen=True)
class MethodCollapseSpec:
    start: int  # byte offset relative to the start of the spliced type
    end: int  # exclusive
    replacement: str

    def __repr__(self) -> str:
        return f"MethodCollapseSpec({self.start}:{self.end}, {self.replacement!r})"


# Chunk paired with the qualified name of the type that owns it
OwnedChunk = Tuple[Chunk, Optional[str]]


class AbstractCodeChunker(ABC):
    """
    Abstract base class for syntax-tree based code chunkers.
    """

    @abstractmethod
    def iter_owned_chunks(self, root: ts.Node, source: bytes) -> Iterator[OwnedChunk]:
        """
        Lazily yield chunks for the tree rooted at *root*, each paired with
        the qualified name of its owning type (None when unresolved).
        """
        ...

    def chunk(self, root: ts.Node, source: bytes) -> Iterator[Chunk]:
        """
        Lazily yield chunks for the tree rooted at *root*.
        """
        for chunk, _ in self.iter_owned_chunks(root, source):
            yield chunk
