import random

from prettyfit import (
    LINE,
    NIL,
    better,
    bracket,
    concat,
    group,
    intersperse,
    nest,
    text,
)
from prettyfit.doc import (
    Concat,
    FlatChoice,
    Line,
    Nest,
    Nil,
    Text,
)
from prettyfit.sdoc import (
    SLine,
    SNIL,
    SText,
)


class Tree:
    __slots__ = ('label', 'children')

    def __init__(self, label, children=()):
        self.label = label
        self.children = list(children)


def show_tree(tree):
    return group(
        concat([
            tree.label,
            nest(len(tree.label), show_bracket(tree.children)),
        ])
    )


def show_bracket(trees):
    if not trees:
        return NIL
    return bracket(1, '[', show_trees(trees), ']')


def show_trees(trees):
    return concat(intersperse(concat([',', LINE]), map(show_tree, trees)))


def default_tree():
    return Tree('aaa', [
        Tree('bbbbb', [Tree('ccc'), Tree('dd')]),
        Tree('eee'),
        Tree('ffff', [Tree('gg'), Tree('hhh'), Tree('ii')]),
    ])


WORDS = ['a', 'bb', 'ccc', 'dddd', 'eeeee', 'ffffffffff', '']


def random_doc(rng, depth=4):
    """A random doc built only through the public constructors."""
    if depth == 0 or rng.random() < 0.25:
        return rng.choice([NIL, LINE, LINE, text(rng.choice(WORDS))])

    kind = rng.choice(['concat', 'concat', 'nest', 'group', 'group'])
    if kind == 'concat':
        return concat([
            random_doc(rng, depth - 1)
            for _ in range(rng.randint(2, 3))
        ])
    elif kind == 'nest':
        return nest(rng.randint(0, 4), random_doc(rng, depth - 1))
    return group(random_doc(rng, depth - 1))


def random_docs(count, seed=0, depth=4):
    rng = random.Random(seed)
    return [random_doc(rng, depth) for _ in range(count)]


def eager_layout(width, doc):
    """Lays out ``doc`` by building both continuations at every choice and
    picking one with ``better``, as in the paper. Recursive and exponential;
    only for small docs."""
    return _best(width, 0, [(0, doc)])


def _best(width, column, pending):
    if not pending:
        return SNIL

    *rest, (indent, doc) = pending

    if isinstance(doc, Nil):
        return _best(width, column, rest)
    elif isinstance(doc, Concat):
        return _best(
            width,
            column,
            rest + [(indent, doc.right), (indent, doc.left)]
        )
    elif isinstance(doc, Nest):
        return _best(width, column, rest + [(indent + doc.indent, doc.doc)])
    elif isinstance(doc, Text):
        return SText(
            doc.value,
            _best(width, column + len(doc.value), rest)
        )
    elif isinstance(doc, Line):
        return SLine(indent, _best(width, indent, rest))

    assert isinstance(doc, FlatChoice)
    return better(
        width,
        column,
        _best(width, column, rest + [(indent, doc.when_flat)]),
        _best(width, column, rest + [(indent, doc.when_broken)]),
    )
