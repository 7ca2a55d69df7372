"""
Document Merger: left-priority deep merge of JSON documents.

All multi-source merging goes through ``deep_merge``; the tie-break
direction is fixed here and nowhere else.

    st1.json  {"a": "1", "c": {"x": "d1"}}
    st2.json  {"b": "2", "c": {"y": "d2"}}

    merge_many(["st1.json", "st2.json"])
    # -> {"a": "1", "c": {"x": "d1", "y": "d2"}, "b": "2"}
"""

from typing import Optional, Sequence

from rho.loader import load
from rho.model import Document, PathLike


def deep_merge(priority: Document, fallback: Document) -> Document:
    """
    Merge two documents, ``priority`` winning every conflict.

    Nested mappings present on both sides are merged recursively. Any
    other conflict (scalars, lists, mapping vs. scalar) keeps the
    ``priority`` value whole; lists are never concatenated.

    Neither input is modified.
    """
    merged: Document = dict(priority)
    for key, value in fallback.items():
        if key not in merged:
            merged[key] = value
        elif isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = deep_merge(merged[key], value)
    return merged


def merge_many(paths: Sequence[PathLike]) -> Optional[Document]:
    """
    Load and merge files; the first listed file wins conflicts.

    A file that is missing or malformed is skipped (its diagnostic is
    logged by the loader) and the remaining files are still merged.

    Returns:
        Merged document, or None if no file produced a document
    """
    merged: Optional[Document] = None
    for path in paths:
        document = load(path)
        if document is None:
            continue
        merged = document if merged is None else deep_merge(merged, document)
    return merged


__all__ = ["deep_merge", "merge_many"]
