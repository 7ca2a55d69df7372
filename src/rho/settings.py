"""
Environment-driven settings.

Read once per invocation; nothing here is cached at import time so that
each run (and each test) sees the current environment.

Variables:
    RHO_HOME      Directory holding the default style.json,
                  mathjax_config.json and mathjax_typeset.json.
                  Defaults to the installed rho package directory.
    RHO_RENDERER  "package.module:attribute" reference to the rendering
                  engine. Defaults to the "rho.renderers" entry point.
    RHO_DEBUG     "1" enables debug logging and tracebacks.
"""

import os
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Mapping, Optional


def install_dir() -> Path:
    """Directory the rho package is installed in."""
    return Path(str(resources.files(__package__)))


@dataclass(frozen=True)
class Settings:
    home: Path
    renderer: Optional[str] = None
    debug: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        home = env.get("RHO_HOME")
        return cls(
            home=Path(home) if home else install_dir(),
            renderer=env.get("RHO_RENDERER") or None,
            debug=env.get("RHO_DEBUG") == "1",
        )


__all__ = ["Settings", "install_dir"]
