"""
Document Loader: file path -> parsed JSON document.

Loading never raises for file problems. Every outcome is returned:
    - missing file      -> absent, silent
    - unreadable file   -> absent, warning logged (READ_ERROR)
    - malformed JSON    -> absent, warning logged (PARSE_ERROR)

Callers branch on ``is None`` (or on LoadResult for the reason).
"""

import json
from pathlib import Path
from typing import Optional

from rho.jsonc import strip_comments
from rho.logging_utils import get_logger
from rho.model import Document, FailureKind, LoadFailure, LoadResult, PathLike


logger = get_logger(__name__)


def parse_document(text: str) -> Document:
    """
    Parse commented JSON text into a document.

    Raises:
        json.JSONDecodeError: If the text is not valid JSON after stripping comments
        ValueError: If the top-level value is not an object
    """
    value = json.loads(strip_comments(text))
    if not isinstance(value, dict):
        raise ValueError(f"top-level JSON value must be an object, got {type(value).__name__}")
    return value


def read_document(path: PathLike) -> LoadResult:
    """
    Load one file and report exactly what happened.

    Args:
        path: File to load

    Returns:
        LoadResult with a document, a failure, or neither (missing file)
    """
    name = str(path)
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (FileNotFoundError, NotADirectoryError):
        return LoadResult(path=name)
    except (OSError, ValueError) as e:
        # ValueError covers UnicodeDecodeError and embedded null bytes
        return LoadResult(
            path=name,
            failure=LoadFailure(name, FailureKind.READ_ERROR, type(e).__name__, str(e)),
        )

    try:
        document = parse_document(text)
    except ValueError as e:
        # json.JSONDecodeError is a ValueError subclass
        return LoadResult(
            path=name,
            failure=LoadFailure(name, FailureKind.PARSE_ERROR, type(e).__name__, str(e)),
        )

    return LoadResult(path=name, document=document)


def load(path: Optional[PathLike]) -> Optional[Document]:
    """
    Load a document, logging a warning if an existing file is unusable.

    Example:
        load("diagram.json")
        # -> dict   if diagram.json exists and parses
        # -> None   if it is missing (silent) or malformed (warning logged)
    """
    if path is None:
        return None

    result = read_document(path)
    if result.failure is not None:
        logger.warning(result.failure.describe())
    return result.document


def load_default(path: Optional[PathLike]) -> Optional[Document]:
    """
    Load an optional default file.

    A default that was never configured or does not exist is not an
    error and produces no diagnostic. A default that exists but is
    malformed is reported like any other file.
    """
    # A missing file already loads as None without a diagnostic.
    return load(path)


__all__ = ["parse_document", "read_document", "load", "load_default"]
