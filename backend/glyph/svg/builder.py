"""Write self-contained SVG logo documents.

Every def id is namespaced with the builder's `uid`, which callers derive from
the full seed, so several logos can share one page without clobbering each
other's gradients.
"""

from __future__ import annotations

import re
from typing import Any
from xml.sax.saxutils import escape, quoteattr

from glyph.utils.color import Gradient
from glyph.utils.geometry import fmt

# Code points XML 1.0 forbids in character data, plus unpaired surrogates.
_XML_INVALID = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\ufffe\uffff\ud800-\udfff]")


def xml_text(text: str) -> str:
    """Escape `text` for character data, dropping code points XML cannot carry."""
    return escape(_XML_INVALID.sub("", text))


def _attr_name(key: str) -> str:
    # fill_rule -> fill-rule; trailing underscore allows reserved words (class_)
    return key.rstrip("_").replace("_", "-")


def _attr_value(value: Any) -> str:
    if isinstance(value, float):
        return fmt(value)
    return str(value)


def _attrs(attrs: dict[str, Any]) -> str:
    return " ".join(
        f"{_attr_name(k)}={quoteattr(_attr_value(v))}" for k, v in attrs.items() if v is not None
    )


class SvgBuilder:
    """Collects defs and elements, then serialises one `<svg>` document."""

    def __init__(self, uid: str, size: int = 100, title: str = "") -> None:
        self.uid = uid
        self.size = size
        self.title = title
        self._defs: list[str] = []
        self._body: list[str] = []
        self._ids: set[str] = set()
        self._depth = 1

    def ref(self, local_id: str) -> str:
        return f"{self.uid}-{local_id}"

    def gradient(self, gradient: Gradient) -> str:
        """Register a gradient def and return its `url(#...)` reference."""
        gid = self.ref(gradient.id)
        if gid in self._ids:
            return f"url(#{gid})"
        self._ids.add(gid)

        if gradient.kind == "radial":
            self._defs.append(f'    <radialGradient id="{gid}" cx="50%" cy="50%" r="50%">')
            closing = "    </radialGradient>"
        else:
            x1, y1, x2, y2 = gradient.endpoints()
            self._defs.append(
                f'    <linearGradient id="{gid}" x1="{fmt(x1)}%" y1="{fmt(y1)}%"'
                f' x2="{fmt(x2)}%" y2="{fmt(y2)}%">'
            )
            closing = "    </linearGradient>"

        for stop in gradient.stops:
            opacity = f' stop-opacity="{fmt(stop.opacity)}"' if stop.opacity < 1.0 else ""
            self._defs.append(
                f'      <stop offset="{fmt(stop.offset * 100)}%"'
                f" stop-color={quoteattr(stop.color)}{opacity} />"
            )
        self._defs.append(closing)
        return f"url(#{gid})"

    def knockout(self, local_id: str, cutouts: list[str], stroke_width: float | None = None) -> str:
        """Register a mask that hides the given paths; returns its `url(#...)`.

        With `stroke_width` the cutouts are stroked centerlines instead of filled outlines.
        """
        mid = self.ref(local_id)
        if mid not in self._ids:
            self._ids.add(mid)
            if stroke_width is None:
                paint = 'fill="black"'
            else:
                paint = (
                    f'fill="none" stroke="black" stroke-width="{fmt(stroke_width)}"'
                    ' stroke-linecap="round" stroke-linejoin="round"'
                )
            self._defs.append(f'    <mask id="{mid}" maskUnits="userSpaceOnUse">')
            self._defs.append(f'      <rect x="0" y="0" width="{self.size}" height="{self.size}" fill="white" />')
            for d in cutouts:
                if d:
                    self._defs.append(f"      <path d={quoteattr(d)} {paint} />")
            self._defs.append("    </mask>")
        return f"url(#{mid})"

    def element(self, tag: str, **attrs: Any) -> None:
        self._body.append(f"{'  ' * self._depth}<{tag} {_attrs(attrs)} />")

    def path(self, d: str, **attrs: Any) -> None:
        if not d:
            return
        self.element("path", d=d, **attrs)

    def circle(self, cx: float, cy: float, r: float, **attrs: Any) -> None:
        self.element("circle", cx=float(cx), cy=float(cy), r=float(r), **attrs)

    def rect(self, x: float, y: float, width: float, height: float, **attrs: Any) -> None:
        self.element("rect", x=float(x), y=float(y), width=float(width), height=float(height), **attrs)

    def polygon(self, points: str, **attrs: Any) -> None:
        self.element("polygon", points=points, **attrs)

    def group_open(self, **attrs: Any) -> None:
        attr_str = _attrs(attrs)
        self._body.append(f"{'  ' * self._depth}<g{' ' + attr_str if attr_str else ''}>")
        self._depth += 1

    def group_close(self) -> None:
        self._depth = max(1, self._depth - 1)
        self._body.append(f"{'  ' * self._depth}</g>")

    def build(self) -> str:
        while self._depth > 1:
            self.group_close()

        lines = [
            f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 {self.size} {self.size}"'
            f' width="{self.size}" height="{self.size}" role="img" fill="currentColor">',
        ]
        if self.title:
            lines.append(f"  <title>{xml_text(self.title)}</title>")
        if self._defs:
            lines.append("  <defs>")
            lines.extend(self._defs)
            lines.append("  </defs>")
        lines.extend(self._body)
        lines.append("</svg>")
        return "\n".join(lines)
