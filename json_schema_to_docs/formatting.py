"""
Value formatting helpers shared by the schema renderer.

Every helper returns a Markdown fragment that is safe to drop into a table
cell or a list item.
"""

from __future__ import annotations

from typing import Any

from .config import SKIP_KEY
from .links import anchor
from .nodes import ArrayType, CombinatorType, EnumType, PlainType, RefType, TypeDescriptor
from .parser import parse_type

NOT_AVAILABLE = "_n/a_"


def quote_or_fallback(value: Any) -> str:
    """Backtick-quote *value*, or return ``_n/a_`` when it is falsy.

    Backticks inside the value are removed so the code span stays intact.
    """
    if not value:
        return NOT_AVAILABLE
    return f"`{str(value).replace('`', '')}`"


def inspect_value(value: Any) -> str:
    """Full single-line representation of *value*, without depth limit."""
    return repr(value)


def format_example(example: Any, skip_key: str = SKIP_KEY) -> str:
    """Render one example as a Markdown list item."""
    if isinstance(example, dict):
        example = {k: v for k, v in example.items() if k != skip_key}
    return f"* {quote_or_fallback(inspect_value(example))}"


def type_or_link(descriptor: Any) -> str:
    """
    Render a human-readable type summary, linking to referenced schemas.

    Args:
        descriptor: A raw schema/property mapping or a parsed TypeDescriptor

    Returns:
        Markdown fragment such as `` `array`[`string`] `` or ``[/Foo](#foo)``
    """
    return _render_type(parse_type(descriptor))


def _render_type(descriptor: TypeDescriptor) -> str:
    match descriptor:
        case ArrayType(type_name=type_name, items=items):
            return f"{quote_or_fallback(type_name)}[{_render_type(items or PlainType())}]"
        case RefType(ref=ref):
            return f"[{ref}]({anchor(ref)})"
        case CombinatorType(combinator=combinator, members=members):
            return f"{combinator}({', '.join(_render_type(member) for member in members)})"
        case EnumType(type_name=type_name, values=values):
            quoted = ", ".join(quote_or_fallback(inspect_value(value)) for value in values)
            return f"{quote_or_fallback(type_name)} in ({quoted})"
        case PlainType(type_name=type_name):
            return quote_or_fallback(type_name)
        case _:
            raise TypeError(f"Unknown type descriptor: {descriptor!r}")
