"""
Installer Output

Append-only HTML sink for the web installer. The page header is written on
the first flush; the footer once, on finish().
"""

import io
from typing import Optional, List, TextIO

from markupsafe import escape


HEADER_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{title}</title>
</head>
<body>
<div id="installer">
<h1>{title}</h1>
"""

FOOTER = """</div>
</body>
</html>
"""


class InstallerOutput:
    """Buffered output stream for installer pages."""

    def __init__(self, sink: Optional[TextIO] = None, title: str = "SciClope Installer"):
        self.sink = sink if sink is not None else io.StringIO()
        self.title = title
        self.emitted: List[str] = []
        self._buffer = ""
        self._header_done = False
        self._finished = False

    @property
    def header_done(self) -> bool:
        return self._header_done

    def _write(self, text: str):
        self.sink.write(text)
        self.emitted.append(text)

    def flush_header(self):
        """Write the page header. Only the first call has any effect."""
        if self._header_done:
            return
        self._header_done = True
        self._write(HEADER_TEMPLATE.format(title=escape(self.title)))

    def add_html(self, html: str):
        """Append raw HTML and flush it to the sink."""
        self._buffer += html
        self.flush()

    def flush(self):
        """Write any buffered content, emitting the header first if needed."""
        if not self._header_done:
            self.flush_header()
        if self._buffer:
            self._write(self._buffer)
            self._buffer = ""
            if hasattr(self.sink, "flush"):
                self.sink.flush()

    def finish(self):
        """Flush remaining content and close the document."""
        self.flush()
        if not self._finished:
            self._finished = True
            self._write(FOOTER)

    def getvalue(self) -> str:
        """Return everything written so far."""
        return "".join(self.emitted)
