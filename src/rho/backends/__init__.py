"""Rendering engine lookup and contract (the engine itself is external)."""

from .renderer import Diagram, DiagramFactory, GeneratedDiagram, RendererNotFoundError, load_renderer

__all__ = ["Diagram", "DiagramFactory", "GeneratedDiagram", "RendererNotFoundError", "load_renderer"]
