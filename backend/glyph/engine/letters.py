"""Letter primitives — each uppercase letter reduced to a few centerline strokes.

Every builder takes (size, weight, cx, cy) and returns path data meant to be
stroked at `weight` with round caps. The stroke box is inset by half the weight
so thick letters stay inside `size`.
"""

from __future__ import annotations

from typing import Callable

from glyph.utils.geometry import bezier_ellipse, describe_arc, fmt, rounded_rect

LetterBuilder = Callable[[float, float, float, float], str]

DEFAULT_LETTER = "default"


def _box(s: float, w: float, cx: float, cy: float) -> tuple[float, float, float, float, float]:
    """(half-height, half-width, left, right, top) after insetting by the stroke weight."""
    h = max(s / 2 - w / 2, s * 0.2)
    a = h * 0.78
    return h, a, cx - a, cx + a, cy - h


def _p(*coords: float) -> str:
    return " ".join(fmt(c) for c in coords)


def _a(s, w, cx, cy):
    h, a, l, r, t = _box(s, w, cx, cy)
    b = cy + h
    bar = cy + h * 0.25
    return f"M {_p(l, b)} L {_p(cx, t)} L {_p(r, b)} M {_p(l + a * 0.45, bar)} L {_p(r - a * 0.45, bar)}"


def _b(s, w, cx, cy):
    h, a, l, r, t = _box(s, w, cx, cy)
    b, m, q = cy + h, cx, h / 2
    return (
        f"M {_p(l, b)} L {_p(l, t)} L {_p(m, t)} A {_p(q * 0.9, q)} 0 0 1 {_p(m, cy)} L {_p(l, cy)} "
        f"M {_p(m, cy)} A {_p(q, q)} 0 0 1 {_p(m, b)} L {_p(l, b)}"
    )


def _c(s, w, cx, cy):
    h = _box(s, w, cx, cy)[0]
    return describe_arc((cx, cy), h, 140, 400)


def _d(s, w, cx, cy):
    h, a, l, r, t = _box(s, w, cx, cy)
    m = cx - a * 0.25
    return f"M {_p(l, t)} L {_p(m, t)} A {_p(a * 1.25, h)} 0 0 1 {_p(m, cy + h)} L {_p(l, cy + h)} Z"


def _e(s, w, cx, cy):
    h, a, l, r, t = _box(s, w, cx, cy)
    b = cy + h
    return f"M {_p(r, t)} L {_p(l, t)} L {_p(l, b)} L {_p(r, b)} M {_p(l, cy)} L {_p(r - a * 0.3, cy)}"


def _f(s, w, cx, cy):
    h, a, l, r, t = _box(s, w, cx, cy)
    return f"M {_p(r, t)} L {_p(l, t)} L {_p(l, cy + h)} M {_p(l, cy)} L {_p(r - a * 0.3, cy)}"


def _g(s, w, cx, cy):
    h = _box(s, w, cx, cy)[0]
    return (
        describe_arc((cx, cy), h, 150, 400)
        + f" M {_p(cx, cy)} L {_p(cx + h * 0.6, cy)} L {_p(cx + h * 0.6, cy + h * 0.7)}"
    )


def _h(s, w, cx, cy):
    h, a, l, r, t = _box(s, w, cx, cy)
    b = cy + h
    return f"M {_p(l, t)} L {_p(l, b)} M {_p(r, t)} L {_p(r, b)} M {_p(l, cy)} L {_p(r, cy)}"


def _i(s, w, cx, cy):
    h, a, l, r, t = _box(s, w, cx, cy)
    b = cy + h
    return (
        f"M {_p(cx, t)} L {_p(cx, b)} M {_p(cx - a * 0.5, t)} L {_p(cx + a * 0.5, t)} "
        f"M {_p(cx - a * 0.5, b)} L {_p(cx + a * 0.5, b)}"
    )


def _j(s, w, cx, cy):
    h, a, l, r, t = _box(s, w, cx, cy)
    y = cy + h * 0.4
    return f"M {_p(cx + a * 0.5, t)} L {_p(cx + a * 0.5, y)} A {_p(a * 0.6, h * 0.6)} 0 0 1 {_p(cx - a * 0.7, y)}"


def _k(s, w, cx, cy):
    h, a, l, r, t = _box(s, w, cx, cy)
    b = cy + h
    return f"M {_p(l, t)} L {_p(l, b)} M {_p(r, t)} L {_p(l + a * 0.1, cy)} L {_p(r, b)}"


def _l(s, w, cx, cy):
    h, a, l, r, t = _box(s, w, cx, cy)
    b = cy + h
    return f"M {_p(l, t)} L {_p(l, b)} L {_p(r, b)}"


def _m(s, w, cx, cy):
    h, a, l, r, t = _box(s, w, cx, cy)
    b = cy + h
    return f"M {_p(l, b)} L {_p(l, t)} L {_p(cx, cy + h * 0.2)} L {_p(r, t)} L {_p(r, b)}"


def _n(s, w, cx, cy):
    h, a, l, r, t = _box(s, w, cx, cy)
    b = cy + h
    return f"M {_p(l, b)} L {_p(l, t)} L {_p(r, b)} L {_p(r, t)}"


def _o(s, w, cx, cy):
    h, a = _box(s, w, cx, cy)[:2]
    return bezier_ellipse(cx, cy, a, h)


def _p_letter(s, w, cx, cy):
    h, a, l, r, t = _box(s, w, cx, cy)
    q = h / 2
    return f"M {_p(l, cy + h)} L {_p(l, t)} L {_p(cx, t)} A {_p(q, q)} 0 0 1 {_p(cx, cy)} L {_p(l, cy)}"


def _q(s, w, cx, cy):
    h, a = _box(s, w, cx, cy)[:2]
    return bezier_ellipse(cx, cy, a, h) + f" M {_p(cx + a * 0.3, cy + h * 0.4)} L {_p(cx + a, cy + h)}"


def _r(s, w, cx, cy):
    h, a, l, r, t = _box(s, w, cx, cy)
    return _p_letter(s, w, cx, cy) + f" M {_p(cx - a * 0.1, cy)} L {_p(r, cy + h)}"


def _s(s, w, cx, cy):
    h, a, l, r, t = _box(s, w, cx, cy)
    b = cy + h
    return (
        f"M {_p(cx + a * 0.8, t + h * 0.25)} A {_p(a * 0.9, h / 2)} 0 1 0 {_p(cx, cy)} "
        f"A {_p(a * 0.9, h / 2)} 0 1 1 {_p(cx - a * 0.8, b - h * 0.25)}"
    )


def _t(s, w, cx, cy):
    h, a, l, r, t = _box(s, w, cx, cy)
    return f"M {_p(l, t)} L {_p(r, t)} M {_p(cx, t)} L {_p(cx, cy + h)}"


def _u(s, w, cx, cy):
    h, a, l, r, t = _box(s, w, cx, cy)
    y = cy + h * 0.3
    return f"M {_p(l, t)} L {_p(l, y)} A {_p(a, h * 0.7)} 0 0 0 {_p(r, y)} L {_p(r, t)}"


def _v(s, w, cx, cy):
    h, a, l, r, t = _box(s, w, cx, cy)
    return f"M {_p(l, t)} L {_p(cx, cy + h)} L {_p(r, t)}"


def _w(s, w, cx, cy):
    h, a, l, r, t = _box(s, w, cx, cy)
    b = cy + h
    return f"M {_p(l, t)} L {_p(cx - a * 0.5, b)} L {_p(cx, cy - h * 0.2)} L {_p(cx + a * 0.5, b)} L {_p(r, t)}"


def _x(s, w, cx, cy):
    h, a, l, r, t = _box(s, w, cx, cy)
    b = cy + h
    return f"M {_p(l, t)} L {_p(r, b)} M {_p(r, t)} L {_p(l, b)}"


def _y(s, w, cx, cy):
    h, a, l, r, t = _box(s, w, cx, cy)
    return f"M {_p(l, t)} L {_p(cx, cy)} M {_p(r, t)} L {_p(cx, cy)} L {_p(cx, cy + h)}"


def _z(s, w, cx, cy):
    h, a, l, r, t = _box(s, w, cx, cy)
    b = cy + h
    return f"M {_p(l, t)} L {_p(r, t)} L {_p(l, b)} L {_p(r, b)}"


def _default(s, w, cx, cy):
    """Abstract mark for names that do not start with A-Z: a rounded square with a center dot."""
    h = _box(s, w, cx, cy)[0] * 0.8
    dot = max(w * 0.35, 1.0)
    return rounded_rect(cx - h, cy - h, 2 * h, 2 * h, h * 0.3) + " " + bezier_ellipse(cx, cy, dot, dot)


LETTER_STROKES: dict[str, LetterBuilder] = {
    "A": _a, "B": _b, "C": _c, "D": _d, "E": _e, "F": _f, "G": _g,
    "H": _h, "I": _i, "J": _j, "K": _k, "L": _l, "M": _m, "N": _n,
    "O": _o, "P": _p_letter, "Q": _q, "R": _r, "S": _s, "T": _t, "U": _u,
    "V": _v, "W": _w, "X": _x, "Y": _y, "Z": _z,
    DEFAULT_LETTER: _default,
}


def letter_primitive(brand_name: str) -> tuple[str, LetterBuilder]:
    """First character of the brand, uppercased. Anything outside A-Z maps to the default primitive."""
    first = (brand_name or "").strip()[:1].upper()
    if len(first) == 1 and first in LETTER_STROKES:
        return first, LETTER_STROKES[first]
    return DEFAULT_LETTER, LETTER_STROKES[DEFAULT_LETTER]
