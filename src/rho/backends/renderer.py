"""
Rendering engine contract.

Rho does not render anything itself. The engine is any callable that
builds a diagram object from the merged documents:

    diagram = factory(diagram_document, {"style": ..., "mjConfig": ..., "mjTypeset": ...})
    generated = await diagram.generate()
    svg_text = generated.svg()

Any option may be None and the engine must tolerate that.

Engines are found either by an explicit "package.module:attribute"
reference (RHO_RENDERER) or through the "rho.renderers" entry point group.
"""

import importlib
from importlib.metadata import entry_points
from typing import Any, Awaitable, Callable, Dict, Optional, Protocol, Union

from rho.model import Document


ENTRY_POINT_GROUP = "rho.renderers"


class RendererNotFoundError(LookupError):
    """Raised when no rendering engine can be located."""


class GeneratedDiagram(Protocol):
    def svg(self) -> str:
        ...


class Diagram(Protocol):
    def generate(self) -> Union[Awaitable[GeneratedDiagram], GeneratedDiagram]:
        ...


DiagramFactory = Callable[[Document, Dict[str, Optional[Document]]], Diagram]


def import_reference(reference: str) -> Any:
    """
    Import an object from a "package.module:attribute" reference.

    Raises:
        RendererNotFoundError: If the reference is malformed or cannot be imported
    """
    module_name, sep, attribute = reference.partition(":")
    if not sep or not module_name or not attribute:
        raise RendererNotFoundError(
            f"Renderer reference '{reference}' must look like 'package.module:attribute'"
        )

    try:
        target = importlib.import_module(module_name)
    except ImportError as e:
        raise RendererNotFoundError(f"Cannot import renderer module '{module_name}': {e}") from e

    for part in attribute.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as e:
            raise RendererNotFoundError(
                f"Renderer module '{module_name}' has no attribute '{attribute}'"
            ) from e
    return target


def load_renderer(reference: Optional[str] = None) -> DiagramFactory:
    """
    Locate the rendering engine.

    Args:
        reference: Optional "package.module:attribute"; when omitted the
                   first "rho.renderers" entry point is used

    Returns:
        Callable building a Diagram from (document, options)

    Raises:
        RendererNotFoundError: If nothing usable is found
    """
    if reference:
        factory = import_reference(reference)
    else:
        candidates = sorted(entry_points(group=ENTRY_POINT_GROUP), key=lambda ep: ep.name)
        if not candidates:
            raise RendererNotFoundError(
                f"No rendering engine installed (entry point group '{ENTRY_POINT_GROUP}'); "
                "set RHO_RENDERER to 'package.module:attribute'"
            )
        try:
            factory = candidates[0].load()
        except ImportError as e:
            raise RendererNotFoundError(
                f"Cannot load renderer entry point '{candidates[0].name}': {e}"
            ) from e

    if not callable(factory):
        raise RendererNotFoundError(f"Renderer '{reference or candidates[0].value}' is not callable")
    return factory


__all__ = [
    "ENTRY_POINT_GROUP",
    "RendererNotFoundError",
    "GeneratedDiagram",
    "Diagram",
    "DiagramFactory",
    "import_reference",
    "load_renderer",
]
