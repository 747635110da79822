"""CLI console helpers with optional Rich support.

Rich is imported lazily so that ``--help`` and ``--version`` keep
working in a stripped-down environment where it is missing.

Text that comes from the user (labels, paths, error messages that quote
them) must go through :func:`escape` or be printed with
``markup=False``; otherwise Rich reads ``[...]`` as markup.
"""

from __future__ import annotations

import sys
from typing import Any


def get_rich_console() -> Any:
    """Create a Rich console targeting stderr.

    Raises ``ModuleNotFoundError`` when Rich is not importable.
    """
    from rich.console import Console

    return Console(stderr=True)


def escape(text: object) -> str:
    """Escape Rich markup in *text*.

    The plain fallback prints markup verbatim, so *text* is returned
    unchanged when Rich is missing.
    """
    try:
        from rich.markup import escape as rich_escape
    except ModuleNotFoundError:
        return str(text)
    return rich_escape(str(text))


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with plain-stderr fallback."""

    def print(self, *objects: object, markup: bool = True) -> None:
        """Render with Rich when available, else plain stderr print."""
        try:
            rich_console = get_rich_console()
        except ModuleNotFoundError:
            print(*objects, file=sys.stderr)
            return
        rich_console.print(*objects, markup=markup)


console = _ConsoleProxy()
