"""
Core Resolution Model Objects

Defines the data structures passed between the resolution layers:
    - Documents (parsed JSON mappings)
    - Load results and failures (why a document is absent)
    - Resolved configurations (one document per slot)

ARCHITECTURAL RULE:
    These objects:
        - Know nothing about argument syntax
        - Know nothing about the rendering engine
        - Represent outcomes, not behavior
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Union


Document = Dict[str, Any]
PathLike = Union[str, Path]


class FailureKind(Enum):
    """Why an existing file could not be turned into a document."""
    READ_ERROR = "read"
    PARSE_ERROR = "parse"


@dataclass(frozen=True)
class LoadFailure:
    """
    Describes a failed read or parse of an existing file.

    A missing file is NOT a failure: absence is an ordinary outcome and
    carries no LoadFailure at all.

    Properties:
        path: File that was being loaded
        kind: READ_ERROR or PARSE_ERROR
        error: Name of the underlying error (e.g. "JSONDecodeError")
        message: Human readable description of the error
    """

    path: str
    kind: FailureKind
    error: str
    message: str

    def describe(self) -> str:
        return f"{self.error}: {self.message}. <File: '{self.path}'>"


@dataclass(frozen=True)
class LoadResult:
    """
    Outcome of loading one file.

    Exactly one of these holds:
        - document is set (success)
        - failure is set (file exists but is unreadable or malformed)
        - neither is set (file does not exist)
    """

    path: str
    document: Optional[Document] = None
    failure: Optional[LoadFailure] = None

    @property
    def present(self) -> bool:
        return self.document is not None

    @property
    def missing(self) -> bool:
        return self.document is None and self.failure is None


@dataclass
class ResolvedConfiguration:
    """
    Final merged documents for one invocation.

    Any slot may be None. The diagram slot is the only required one:
    when it is None no diagram is constructed.

    Properties:
        diagram: Diagram document (-d / --diagram)
        style: Merged style overlays (-s / --style over style.json)
        mj_config: MathJax configuration (-c / --config or default)
        mj_typeset: MathJax typeset options (-t / --typeset or default)
    """

    diagram: Optional[Document] = None
    style: Optional[Document] = None
    mj_config: Optional[Document] = None
    mj_typeset: Optional[Document] = None

    @property
    def complete(self) -> bool:
        """True when the required diagram slot resolved."""
        return self.diagram is not None

    def options(self) -> Dict[str, Optional[Document]]:
        """Options bag in the shape the rendering engine expects."""
        return {
            "style": self.style,
            "mjConfig": self.mj_config,
            "mjTypeset": self.mj_typeset,
        }


__all__ = [
    "Document",
    "PathLike",
    "FailureKind",
    "LoadFailure",
    "LoadResult",
    "ResolvedConfiguration",
]
