"""Raw SQL fragments with their own bound values."""

import string
from typing import Any, Literal

from ._bases import Expression
from ..errors import StructuralBuildError


class Raw(Expression):
    """Literal SQL text with values interleaved between its segments.

    ``segments`` always holds one more item than ``parameters``; the
    compiler emits ``segments[0] <p1> segments[1] <p2> ...`` and numbers the
    placeholders within the enclosing query.
    """

    kind: Literal["raw"] = "raw"
    segments: tuple[str, ...]
    parameters: tuple[Any, ...] = ()


def sql(template: str, *values: Any) -> Raw:
    """Build a fragment from ``template``, where each ``{}`` receives one of ``values``.

    Use ``{{`` and ``}}`` for literal braces. Example::

        sql("created_at > now() - {} * interval '1 day'", 7)
    """
    segments = []
    current = []
    try:
        parsed = list(string.Formatter().parse(template))
    except ValueError as error:
        raise StructuralBuildError(f"Invalid SQL template {template!r}: {error}") from error
    for literal_text, field_name, format_spec, conversion in parsed:
        current.append(literal_text)
        if field_name is None:
            continue
        if field_name or format_spec or conversion:
            raise StructuralBuildError(
                f"Invalid SQL template {template!r}: only bare {{}} placeholders are supported"
            )
        segments.append("".join(current))
        current = []
    segments.append("".join(current))
    if len(segments) - 1 != len(values):
        raise StructuralBuildError(
            f"SQL template {template!r} has {len(segments) - 1} placeholder(s) "
            f"but {len(values)} value(s) were given"
        )
    return Raw(segments=tuple(segments), parameters=tuple(values))


def raw(text: str) -> Raw:
    """Fragment emitted verbatim, with no bound values."""
    if not isinstance(text, str):
        raise StructuralBuildError(f"Raw SQL must be a string; got {type(text)}")
    return Raw(segments=(text,))
