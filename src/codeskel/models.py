from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict

# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class ProgrammingLanguage(str, Enum):
    JAVA = "java"


class ChunkType(str, Enum):
    CLASS_DEFINITION = "class_definition"
    METHOD_DEFINITION = "method_definition"


# Core data containers
class Chunk(BaseModel):
    """
    A retrievable unit of a source file.

    Lines are zero-based document rows, both ends inclusive. `class_name` is
    never set by a chunker; the orchestration layer attaches it on request.
    """

    model_config = ConfigDict(frozen=True)

    content: str
    start_line: int
    end_line: int
    type: ChunkType

    method_identifier: Optional[str] = None
    class_name: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "content": self.content,
            "startLine": self.start_line,
            "endLine": self.end_line,
            "type": self.type.value,
            "methodIdentifier": self.method_identifier,
            "className": self.class_name,
        }
