"""
batview

A CLI tool that prints files with syntax highlighting inside a framed grid
and, for files in a git working tree, marks the lines that were added,
removed or modified since the index.
"""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("batview")
except PackageNotFoundError:
    __version__ = "0.1.0"

# Public API exports
__all__ = [
    "__version__",
]
