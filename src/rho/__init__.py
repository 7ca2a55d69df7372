"""
Rho: command-line front end for JSON-described diagrams.

Resolves a diagram document plus style and MathJax overlays from the
command line, merges them, and hands the result to a rendering engine.

ARCHITECTURAL GUARANTEE:
------------------------
This package contains ZERO knowledge of:
    - Diagram layout
    - SVG generation
    - MathJax typesetting

Rendering is delegated to an external engine (see rho.backends).
Everything here is argument scanning, file loading and merging.
"""

__version__ = "0.0.1"
