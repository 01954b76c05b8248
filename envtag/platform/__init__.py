"""Platform helpers: subprocesses and files."""

from .files import atomic_write_text, remove_file
from .process import ProcessError, run

__all__ = ["ProcessError", "atomic_write_text", "remove_file", "run"]
