"""Rendered SVG document model and its output encodings."""

from __future__ import annotations

import io
import re
from pathlib import Path
from urllib.parse import quote

from pydantic import BaseModel, Field

SVG_MIME_TYPE = "image/svg+xml"

# Characters encodeURIComponent leaves alone besides alphanumerics.
_URI_SAFE = "-_.!~*'()"


class SvgDocument(BaseModel):
    """A complete avatar: markup plus the colors that went into it."""

    markup: str
    path_data: str = ""
    colors: dict[str, str] = Field(default_factory=dict)

    def __str__(self) -> str:
        return self.markup

    def to_url_encoded(self, with_prefix: bool = False) -> str:
        encoded = quote(self.markup, safe=_URI_SAFE)
        if with_prefix:
            return f"data:{SVG_MIME_TYPE},{encoded}"
        return encoded

    def to_bytes(self) -> bytes:
        return self.markup.encode("utf-8")

    def to_file_like(self) -> io.BytesIO:
        return io.BytesIO(self.to_bytes())

    def write_file(self, filename: str | Path) -> Path:
        """Write to ``filename`` with a single ``.svg`` extension."""
        path = Path(re.sub(r"\.svg$", "", str(filename)) + ".svg")
        path.write_text(self.markup, encoding="utf-8")
        return path
