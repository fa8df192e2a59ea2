"""CLI command implementations for verstree.

Each command lives in its own module; cli.py only wires them into Typer.
"""

from .diffstat import diffstat
from .init import init
from .log import log
from .record import record
from .restore import restore
from .show import show
from .tree import tree

__all__ = [
    "diffstat",
    "init",
    "log",
    "record",
    "restore",
    "show",
    "tree",
]
