def is_doc(doc):
    if isinstance(doc, str):
        return True
    return isinstance(doc, Doc)


class Doc:
    __slots__ = ()

    def __eq__(self, other):
        if not is_doc(other):
            return NotImplemented
        return docs_equal(self, other)

    __hash__ = None

    def _children(self):
        return ()

    def _fields(self):
        return ()


class Text(Doc):
    __slots__ = ('value', )

    def __init__(self, value):
        if not isinstance(value, str):
            raise TypeError(
                f"Got {repr(value)} of type {type(value).__name__}, "
                "expected 'str'"
            )
        self.value = value

    def _fields(self):
        return (self.value, )

    def __repr__(self):
        return f'Text({repr(self.value)})'


class Nil(Doc):
    def __repr__(self):
        return 'NIL'


NIL = Nil()


class Concat(Doc):
    __slots__ = ('left', 'right')

    def __init__(self, left, right):
        assert is_doc(left)
        assert is_doc(right)

        self.left = left
        self.right = right

    def _children(self):
        return (self.left, self.right)

    def __repr__(self):
        return f'Concat({repr(self.left)}, {repr(self.right)})'


class Nest(Doc):
    __slots__ = ('indent', 'doc')

    def __init__(self, indent, doc):
        assert isinstance(indent, int)
        assert is_doc(doc)

        self.indent = indent
        self.doc = doc

    def _fields(self):
        return (self.indent, )

    def _children(self):
        return (self.doc, )

    def __repr__(self):
        return f'Nest({repr(self.indent)}, {repr(self.doc)})'


class Line(Doc):
    def __repr__(self):
        return 'LINE'


LINE = Line()
SPACE = Text(' ')


class FlatChoice(Doc):
    """Two layouts of the same content. The renderer picks ``when_flat``
    if the rest of the current line fits, and ``when_broken`` otherwise.

    ``when_flat`` must be ``flatten(when_broken)``. This is not checked;
    build instances with ``api.group``.
    """
    __slots__ = ('when_broken', 'when_flat')

    def __init__(self, when_broken, when_flat):
        assert is_doc(when_broken)
        assert is_doc(when_flat)

        self.when_broken = when_broken
        self.when_flat = when_flat

    def _children(self):
        return (self.when_broken, self.when_flat)

    def __repr__(self):
        return (
            f'FlatChoice(when_broken={repr(self.when_broken)}, '
            f'when_flat={repr(self.when_flat)})'
        )


def docs_equal(a, b):
    """Structural equality of two docs, walked without recursion so that
    deeply nested documents compare fine."""
    pending = [(a, b)]
    while pending:
        a, b = pending.pop()
        if a is b:
            continue
        if isinstance(a, str) or isinstance(b, str):
            if not (isinstance(a, str) and isinstance(b, str) and a == b):
                return False
            continue
        if type(a) is not type(b) or a._fields() != b._fields():
            return False
        pending.extend(zip(a._children(), b._children()))
    return True


def flatten(doc):
    """Returns the single-line form of ``doc``: every ``LINE`` becomes a
    space and every ``FlatChoice`` collapses to its flat branch.

    Nest nodes are kept even though they no longer affect anything."""
    flattened = []
    stack = [(doc, False)]

    while stack:
        doc, children_done = stack.pop()

        if isinstance(doc, (str, Text, Nil)):
            flattened.append(doc)
        elif isinstance(doc, Line):
            flattened.append(SPACE)
        elif isinstance(doc, Concat):
            if children_done:
                right = flattened.pop()
                left = flattened.pop()
                flattened.append(Concat(left, right))
            else:
                stack.append((doc, True))
                stack.append((doc.right, False))
                stack.append((doc.left, False))
        elif isinstance(doc, Nest):
            if children_done:
                flattened.append(Nest(doc.indent, flattened.pop()))
            else:
                stack.append((doc, True))
                stack.append((doc.doc, False))
        elif isinstance(doc, FlatChoice):
            stack.append((doc.when_flat, False))
        else:
            raise ValueError((repr(doc), type(doc)))

    assert len(flattened) == 1
    return flattened[0]
