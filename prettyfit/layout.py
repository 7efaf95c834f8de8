"""The best-fit layout algorithm from Wadler's "A prettier printer".

Documents are laid out left to right off a work-list of ``(indent, doc)``
pairs. At every ``FlatChoice`` the flat branch is taken if the remainder of
the current line fits within the page width, otherwise the broken branch.
The choice is greedy: only the current line is looked at.

The work-list is a persistent cons list of ``(indent, doc, rest)`` tuples
(``None`` is the empty list), so looking ahead down one branch shares the
untouched tail with the other branch and with the main loop.
"""
import logging

from .doc import (
    Concat,
    FlatChoice,
    Line,
    Nest,
    Nil,
    Text,
)
from .sdoc import (
    SLine,
    SText,
    iter_sdocs,
    sdocs_from_list,
)

logger = logging.getLogger(__name__)


def fits(width, column, sdoc):
    """Returns True if the first line of ``sdoc``, starting at ``column``,
    does not go past ``width``."""
    for node in iter_sdocs(sdoc):
        if column > width:
            return False
        if isinstance(node, SText):
            column += len(node.value)
        else:
            # SLine or SNIL ends the line.
            return True


def better(width, column, when_flat, when_broken):
    """Picks between two layouts of the same content."""
    if fits(width, column, when_flat):
        return when_flat
    return when_broken


def _fits_pending(width, column, pending):
    """``fits`` for a layout that hasn't been produced yet.

    Equivalent to ``fits(width, column, layout of pending)``, but only the
    first line is worked out. A nested ``FlatChoice`` resolves to its flat
    branch when that fits, so the line fits if either branch does. States
    are ``(column, pending)`` and the tails are shared, so each state is
    explored at most once.
    """
    candidates = [(column, pending)]
    # (column, id(pending)) -> pending; the value keeps the id alive.
    visited = {}

    while candidates:
        column, pending = candidates.pop()

        while column <= width:
            if pending is None:
                return True

            key = (column, id(pending))
            if key in visited:
                break
            visited[key] = pending

            indent, doc, pending = pending

            if isinstance(doc, str):
                column += len(doc)
            elif isinstance(doc, Text):
                column += len(doc.value)
            elif isinstance(doc, Line):
                return True
            elif isinstance(doc, Concat):
                pending = (indent, doc.left, (indent, doc.right, pending))
            elif isinstance(doc, Nest):
                pending = (indent + doc.indent, doc.doc, pending)
            elif isinstance(doc, FlatChoice):
                candidates.append((column, (indent, doc.when_broken, pending)))
                pending = (indent, doc.when_flat, pending)
            elif isinstance(doc, Nil):
                continue
            else:
                raise ValueError((repr(doc), type(doc)))

    return False


def layout(width, doc):
    """Lays out ``doc`` to fit within ``width`` columns where possible.

    Returns the resolved layout as an ``SDoc`` chain. Content that cannot
    fit is laid out broken and may run past ``width``.
    """
    if isinstance(width, bool) or not isinstance(width, int) or width < 1:
        raise ValueError(
            f"Got width {repr(width)}, expected a positive int"
        )

    sdocs = []
    column = 0
    pending = (0, doc, None)

    flat_choices = 0
    broken_choices = 0

    while pending is not None:
        indent, doc, pending = pending

        if isinstance(doc, str):
            sdocs.append((SText, doc))
            column += len(doc)
        elif isinstance(doc, Text):
            sdocs.append((SText, doc.value))
            column += len(doc.value)
        elif isinstance(doc, Line):
            sdocs.append((SLine, indent))
            column = indent
        elif isinstance(doc, Concat):
            pending = (indent, doc.left, (indent, doc.right, pending))
        elif isinstance(doc, Nest):
            pending = (indent + doc.indent, doc.doc, pending)
        elif isinstance(doc, FlatChoice):
            flat_pending = (indent, doc.when_flat, pending)
            if _fits_pending(width, column, flat_pending):
                pending = flat_pending
                flat_choices += 1
            else:
                pending = (indent, doc.when_broken, pending)
                broken_choices += 1
        elif isinstance(doc, Nil):
            continue
        else:
            raise ValueError((repr(doc), type(doc)))

    logger.debug(
        'laid out %d nodes at width %d: %d choices flat, %d broken',
        len(sdocs),
        width,
        flat_choices,
        broken_choices,
    )

    return sdocs_from_list(sdocs)
