"""
Program commands: help, version and diagram processing.

Dispatch precedence when several flags are given:

    -h/--help  >  -v/--version  >  -d/--diagram  >  help (default)

Diagram processing never raises. Every failure (unresolvable diagram,
missing or failing rendering engine, unwritable output) is logged and
ends that operation only.
"""

import asyncio
import inspect
from pathlib import Path
from typing import Any, Awaitable, Optional, Sequence

from rho import __version__, arguments
from rho.assembler import assemble
from rho.backends.renderer import Diagram, DiagramFactory, GeneratedDiagram, load_renderer
from rho.logging_utils import get_logger
from rho.model import PathLike
from rho.settings import Settings


logger = get_logger(__name__)

USAGE = """\
Usage: rho -d [ diagram.json ] [options]
Usage: rho -d [ diagram.json ] -o [ output.svg ] [options]

Options:
  -c, --config   [ mathjax_config.json ]   Path to the mathjax configuration file.
                                           Only the last element is valid.
  -d, --diagram  [ diagram.json ]          Path to the diagram json file.
                                           Required option.
                                           Only the last element is valid.
  -h, --help                               Call help.
  -o, --output   [ output.svg ]            Path to the output diagram svg file.
                                           Only the last element is valid.
                                           If not defined, no file is written.
  -s, --style    [ style.json ]            Path to the style files.
                                           You can define multiple style files.
                                           Properties of earlier files take
                                           priority over later ones.
  -t, --typeset  [ mathjax_typeset.json ]  Path to the mathjax typeset file.
                                           Only the last element is valid.
  -v, --version                            Print "Rho" version.
  -w, --write                              Print result svg to the console.
"""


def show_help() -> None:
    print(USAGE, end="")


def show_version() -> None:
    print(f'"Rho" version: {__version__}')


def _log_failure(e: Exception, outcome: str, debug: bool) -> None:
    logger.error("%s: %s. %s", type(e).__name__, e, outcome)
    if debug:
        logger.debug("Traceback:", exc_info=e)


def create_diagram(
    args: Sequence[str],
    factory: Optional[DiagramFactory] = None,
    settings: Optional[Settings] = None,
) -> Optional[Diagram]:
    """
    Resolve the configuration and construct the diagram object.

    Args:
        args: Argument vector
        factory: Rendering engine (default: located via load_renderer)
        settings: Settings (default: from the environment)

    Returns:
        Constructed diagram, or None if the diagram did not resolve or
        the engine rejected it
    """
    settings = settings or Settings.from_env()
    config = assemble(args, home=settings.home)
    if not config.complete:
        return None

    try:
        if factory is None:
            factory = load_renderer(settings.renderer)
        return factory(config.diagram, config.options())
    except Exception as e:
        _log_failure(e, "Diagram was not created.", settings.debug)
        return None


async def _wait(awaitable: Awaitable[Any]) -> Any:
    return await awaitable


def generate(diagram: Diagram, debug: bool = False) -> Optional[str]:
    """
    Run the engine's generate() to completion and serialize to SVG.

    Returns:
        SVG text, or None if generation failed
    """
    try:
        result = diagram.generate()
        if inspect.isawaitable(result):
            result = asyncio.run(_wait(result))
        generated: GeneratedDiagram = result
        return generated.svg()
    except Exception as e:
        _log_failure(e, "Diagram was not generated.", debug)
        return None


def write_output(path: PathLike, svg: str, debug: bool = False) -> bool:
    """Write SVG text to a file. Returns False (and logs) on failure."""
    try:
        # Encode first so an unencodable result never leaves an empty file
        data = svg.encode("utf-8")
        Path(path).write_bytes(data)
    except (OSError, UnicodeError) as e:
        _log_failure(e, "Diagram was not written.", debug)
        return False
    logger.info("Wrote %s", path)
    return True


def process_diagram(
    args: Sequence[str],
    factory: Optional[DiagramFactory] = None,
    settings: Optional[Settings] = None,
) -> Optional[str]:
    """
    Build the diagram, then write it (-o) and/or print it (-w).

    A failed write does not prevent printing.

    Returns:
        SVG text if the diagram was generated, else None
    """
    settings = settings or Settings.from_env()
    diagram = create_diagram(args, factory=factory, settings=settings)
    if diagram is None:
        return None

    svg = generate(diagram, debug=settings.debug)
    if svg is None:
        return None

    output = arguments.resolve_single(arguments.OUTPUT, args)
    if output is not None:
        write_output(output, svg, debug=settings.debug)
    if arguments.any_occurrence_present(arguments.WRITE, args):
        try:
            print(svg)
        except UnicodeError as e:
            _log_failure(e, "Diagram was not printed.", settings.debug)
    return svg


def apply_commands(
    args: Sequence[str],
    factory: Optional[DiagramFactory] = None,
    settings: Optional[Settings] = None,
) -> None:
    """
    Dispatch on the flags present in the argument vector.

    Example:
        apply_commands(["-d", "diagram.json", "-o", "out.svg"])
        # -> out.svg written using the installed rendering engine
    """
    if arguments.any_occurrence_present(arguments.HELP, args):
        show_help()
    elif arguments.any_occurrence_present(arguments.VERSION, args):
        show_version()
    elif arguments.any_occurrence_present(arguments.DIAGRAM, args):
        process_diagram(args, factory=factory, settings=settings)
    else:
        show_help()


__all__ = [
    "USAGE",
    "show_help",
    "show_version",
    "create_diagram",
    "generate",
    "write_output",
    "process_diagram",
    "apply_commands",
]
