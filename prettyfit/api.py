from .doc import (
    Concat,
    Doc,
    FlatChoice,
    Nest,
    Text,
    NIL,
    LINE,
    flatten,
)


def intersperse(sep, docs):
    """Yields ``docs`` with ``sep`` between each adjacent pair."""
    docs = iter(docs)
    for doc in docs:
        yield doc
        break
    for doc in docs:
        yield sep
        yield doc


def text(x):
    if not isinstance(x, str):
        raise TypeError("Argument to text function must be a str")
    return Text(x)


def cast_doc(doc):
    """Casts value to doc, if possible."""
    if isinstance(doc, Doc):
        return doc
    elif isinstance(doc, str):
        if doc == "":
            return NIL
        return Text(doc)

    raise ValueError(doc)


def empty():
    return NIL


def line():
    """A line break, or a single space when laid out flat."""
    return LINE


def group(doc):
    """Lets the layout algorithm lay ``doc`` out on a single line, with every
    line break inside it turned into a space, if the rest of the line fits
    within the page width. Otherwise ``doc`` is laid out as is, and groups
    nested in it get to choose for themselves.

    This is the only way a ``FlatChoice`` should be built: the flat branch
    is computed here, once, from ``doc``."""
    doc = cast_doc(doc)
    return FlatChoice(doc, flatten(doc))


def concat(docs):
    """Returns a concatenation of the documents in the iterable argument"""
    docs = [cast_doc(doc) for doc in docs]
    if not docs:
        return NIL

    res = docs.pop()
    while docs:
        res = Concat(docs.pop(), res)
    return res


def nest(i, doc):
    """Adds ``i`` to the indentation of every line break in ``doc``."""
    return Nest(i, cast_doc(doc))


def bracket(i, left, doc, right):
    return concat([left, nest(i, doc), right])


def space_concat(x, y):
    return concat([x, ' ', y])


def line_concat(x, y):
    return concat([x, LINE, y])


def softline_concat(x, y):
    """Joins ``x`` and ``y`` with a space if the rest of the line fits,
    and a line break otherwise."""
    return concat([x, group(LINE), y])


def hsep(docs):
    return concat(intersperse(' ', docs))


def vsep(docs):
    return concat(intersperse(LINE, docs))


def fill(docs):
    """Lays out as many of ``docs`` on each line as fit, like words in a
    paragraph.

    Between each pair of adjacent docs the layout algorithm either keeps
    them on the same line, separated by a space and both flattened, or
    starts a new line at the second one."""
    docs = [cast_doc(doc) for doc in docs]
    if not docs:
        return NIL

    # Every doc followed by a join is grouped, so it is laid out flat
    # whenever it fits together with that join.
    *joined, last = docs
    first, *rest = [group(doc) for doc in joined] + [last]
    return concat([
        first,
        *(group(concat([LINE, doc])) for doc in rest)
    ])


def fill_words(s):
    return fill(text(word) for word in s.split())
