from io import StringIO

from .sdoc import (
    SText,
    SLine,
    iter_sdocs,
)

NEWLINE = '\n'
INDENT_CHAR = ' '


def default_render_to_stream(stream, sdoc):
    """Writes the layout to a text stream. A line break is written as one
    newline followed by its indentation in spaces, with nothing trimmed."""
    for node in iter_sdocs(sdoc):
        if isinstance(node, SText):
            stream.write(node.value)
        elif isinstance(node, SLine):
            stream.write(NEWLINE + INDENT_CHAR * node.indent)


def default_render_to_str(sdoc):
    stream = StringIO()
    default_render_to_stream(stream, sdoc)
    return stream.getvalue()
