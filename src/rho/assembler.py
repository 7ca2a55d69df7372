"""
Configuration Assembler: argument vector -> ResolvedConfiguration.

Slots and their policies:

    slot        flags               arity     default file
    ----------  ------------------  --------  --------------------
    diagram     -d, --diagram       single    (none, required)
    style       -s, --style         multiple  style.json
    mj_config   -c, --config        single    mathjax_config.json
    mj_typeset  -t, --typeset       single    mathjax_typeset.json

Single-valued slots fall back to their default when the explicit file is
not given, missing or malformed. The style slot merges every explicit
file over the merged defaults.
"""

import logging
import os
from pathlib import Path
from typing import Optional, Sequence

from rho import arguments
from rho.loader import load, load_default
from rho.logging_utils import get_logger
from rho.merge import deep_merge, merge_many
from rho.model import Document, PathLike, ResolvedConfiguration
from rho.serialization import configuration_to_yaml
from rho.settings import Settings


logger = get_logger(__name__)

STYLE_FILE = "style.json"
MATHJAX_CONFIG_FILE = "mathjax_config.json"
MATHJAX_TYPESET_FILE = "mathjax_typeset.json"


def default_path(file_name: str, home: Optional[PathLike] = None) -> Optional[Path]:
    """
    Locate a default file in the install directory.

    Args:
        file_name: Conventional file name (e.g. "style.json")
        home: Directory to look in (default: Settings.from_env().home)

    Returns:
        Path to the file, or None if it does not exist
    """
    base = Path(home) if home is not None else Settings.from_env().home
    candidate = base / file_name
    # os.path.exists reports unreachable paths as missing instead of raising
    return candidate if os.path.exists(candidate) else None


def resolve_document(
    spellings: Sequence[str],
    default: Optional[PathLike],
    args: Sequence[str],
) -> Optional[Document]:
    """
    Resolve a single-valued slot with a default.

    Example:
        # rho -d diagram.json -c mjc.json
        resolve_document(arguments.CONFIG, "mathjax_config.json", args)
        # -> contents of mjc.json if it loads
        # -> contents of mathjax_config.json otherwise
        # -> None if neither loads
    """
    explicit = arguments.resolve_single(spellings, args)
    if explicit is not None:
        document = load(explicit)
        if document is not None:
            return document
    return load_default(default)


def resolve_documents(
    spellings: Sequence[str],
    defaults: Sequence[Optional[PathLike]],
    args: Sequence[str],
) -> Optional[Document]:
    """
    Resolve a multi-valued slot: explicit files merged over the defaults.

    Example:
        # rho -d diagram.json -s st1.json --style st2.json
        # st1.json {"a": "1", "c": "d1"}
        # st2.json {"b": "2", "c": "d2"}
        # st3.json {"e": "3", "c": "d3"}
        resolve_documents(arguments.STYLE, ["st3.json"], args)
        # -> {"a": "1", "c": "d1", "b": "2", "e": "3"}
    """
    explicit = merge_many(arguments.resolve_all(spellings, args))
    fallback = merge_many([path for path in defaults if path is not None])

    if explicit is None:
        return fallback
    if fallback is None:
        return explicit
    return deep_merge(explicit, fallback)


def resolve_diagram(args: Sequence[str]) -> Optional[Document]:
    """Resolve the required diagram slot; there is no default diagram."""
    path = arguments.resolve_single(arguments.DIAGRAM, args)
    if path is None:
        logger.warning("No diagram file given after -d/--diagram.")
        return None

    document = load(path)
    if document is None:
        logger.warning("Diagram could not be loaded. <File: '%s'>", path)
    return document


def assemble(args: Sequence[str], home: Optional[PathLike] = None) -> ResolvedConfiguration:
    """
    Resolve every configuration slot for one invocation.

    The optional slots are only resolved when the diagram resolved;
    without a diagram nothing will be constructed.

    Args:
        args: Argument vector
        home: Directory holding the default files (default: from settings)

    Returns:
        ResolvedConfiguration (diagram is None if it could not be resolved)
    """
    if home is None:
        home = Settings.from_env().home

    diagram = resolve_diagram(args)
    if diagram is None:
        return ResolvedConfiguration()

    config = ResolvedConfiguration(
        diagram=diagram,
        style=resolve_documents(arguments.STYLE, [default_path(STYLE_FILE, home)], args),
        mj_config=resolve_document(arguments.CONFIG, default_path(MATHJAX_CONFIG_FILE, home), args),
        mj_typeset=resolve_document(arguments.TYPESET, default_path(MATHJAX_TYPESET_FILE, home), args),
    )
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Resolved configuration:\n%s", configuration_to_yaml(config))
    return config


__all__ = [
    "STYLE_FILE",
    "MATHJAX_CONFIG_FILE",
    "MATHJAX_TYPESET_FILE",
    "default_path",
    "resolve_document",
    "resolve_documents",
    "resolve_diagram",
    "assemble",
]
