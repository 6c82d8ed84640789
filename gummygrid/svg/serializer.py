"""Write compact SVG markup for a rendered pattern."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from xml.sax.saxutils import escape

from gummygrid.models.config import Gradient
from gummygrid.utils.math_helpers import format_number

SVG_NS = "http://www.w3.org/2000/svg"


def _attr(value: object) -> str:
    return escape(str(value), {'"': "&quot;"})


def format_css(rules: Mapping[str, Mapping[str, str]]) -> str:
    """``{".a": {"fill": "red"}}`` -> ``.a{fill: red;}``"""
    return "".join(
        selector + "{" + "".join(f"{prop}: {value};" for prop, value in decls.items()) + "}"
        for selector, decls in rules.items()
    )


def format_gradient(element_id: str, gradient: Gradient) -> str:
    attrs = "".join(f' {key}="{_attr(value)}"' for key, value in gradient.attrs.items())
    stops = "".join(
        '<stop offset="{}" stop-color="{}" stop-opacity="{}" />'.format(
            _attr(stop.offset if isinstance(stop.offset, str) else format_number(stop.offset)),
            _attr(stop.color),
            format_number(stop.opacity),
        )
        for stop in gradient.stops
    )
    return f'<{gradient.type} id="{element_id}"{attrs}>{stops}</{gradient.type}>'


def serialize_svg(
    path_data: str,
    canvas_size: float,
    styles: Mapping[str, Mapping[str, str]] | None = None,
    defs: Sequence[str] = (),
) -> str:
    """Square SVG document: style sheet, gradient defs, background and pattern."""
    wh = f"{canvas_size:.2f}"
    parts = [
        f'<svg xmlns="{SVG_NS}" width="{wh}" height="{wh}" viewBox="0 0 {wh} {wh}">',
    ]
    if styles:
        parts.append(f"<style>{format_css(styles)}</style>")
    parts.extend(defs)
    parts.append('<rect class="background" />')
    parts.append(f'<path class="pattern" d="{path_data}" />')
    parts.append("</svg>")
    return "".join(parts)
