class SDoc(object):
    """A resolved layout: a chain of text runs and line breaks ending in
    ``SNIL``. Layouts carry no choices."""
    __slots__ = ()

    def __iter__(self):
        return iter_sdocs(self)

    def __eq__(self, other):
        if not isinstance(other, SDoc):
            return NotImplemented
        for a, b in zip(iter_sdocs(self), iter_sdocs(other)):
            if type(a) is not type(b) or a._value() != b._value():
                return False
        # Both chains end in SNIL, so equal prefixes mean equal lengths.
        return True

    __hash__ = None

    def _value(self):
        return None


class SNil(SDoc):
    __slots__ = ()

    def __repr__(self):
        return 'SNIL'


SNIL = SNil()


class SText(SDoc):
    __slots__ = ('value', 'rest')

    def __init__(self, value, rest=SNIL):
        assert isinstance(value, str)
        assert isinstance(rest, SDoc)
        self.value = value
        self.rest = rest

    def _value(self):
        return self.value

    def __repr__(self):
        return f'SText({repr(self.value)}, ...)'


class SLine(SDoc):
    __slots__ = ('indent', 'rest')

    def __init__(self, indent, rest=SNIL):
        assert isinstance(indent, int)
        assert isinstance(rest, SDoc)
        self.indent = indent
        self.rest = rest

    def _value(self):
        return self.indent

    def __repr__(self):
        return f'SLine({repr(self.indent)}, ...)'


def iter_sdocs(sdoc):
    """Yields the nodes of the chain starting at ``sdoc``, ``SNIL``
    included."""
    while True:
        yield sdoc
        if isinstance(sdoc, SNil):
            return
        sdoc = sdoc.rest


def sdocs_from_list(sdocs):
    """Links ``(cls, value)`` pairs into a chain, first pair at the head."""
    chain = SNIL
    for cls, value in reversed(sdocs):
        chain = cls(value, chain)
    return chain
