# -*- coding: utf-8 -*-

"""Top-level package for prettyfit."""

__author__ = """Tommi Kaikkonen"""
__email__ = 'kaikkonentommi@gmail.com'
__version__ = '0.1.0'

import sys

from .api import (
    bracket,
    cast_doc,
    concat,
    empty,
    fill,
    fill_words,
    group,
    hsep,
    intersperse,
    line,
    line_concat,
    nest,
    softline_concat,
    space_concat,
    text,
    vsep,
)
from .doc import (
    NIL,
    LINE,
    flatten,
)
from .layout import (
    better,
    fits,
    layout,
)
from .render import (
    default_render_to_str,
    default_render_to_stream,
)

to_text = default_render_to_str


__all__ = [
    'PrettyPrinter',
    'pretty',
    'pformat',
    'pprint',
    'layout',
    'fits',
    'better',
    'to_text',
    'default_render_to_str',
    'default_render_to_stream',
    'flatten',
    'bracket',
    'cast_doc',
    'concat',
    'empty',
    'fill',
    'fill_words',
    'group',
    'hsep',
    'line',
    'line_concat',
    'nest',
    'softline_concat',
    'space_concat',
    'text',
    'vsep',
    'NIL',
    'LINE',
    'intersperse',
]


def pretty(width, doc):
    """Lays out ``doc`` within ``width`` columns and returns it as a str."""
    return default_render_to_str(layout(width, cast_doc(doc)))


class PrettyPrinter:
    def __init__(self, width=79):
        self.width = width

    def pprint(self, doc, stream=None, *, end='\n'):
        pprint(doc, stream=stream, width=self.width, end=end)

    def pformat(self, doc):
        return pformat(doc, width=self.width)


def pformat(doc, width=79):
    return pretty(width, doc)


def pprint(doc, stream=None, width=79, *, end='\n'):
    sdoc = layout(width, cast_doc(doc))
    if stream is None:
        stream = sys.stdout
    default_render_to_stream(stream, sdoc)
    if end:
        stream.write(end)
