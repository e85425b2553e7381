"""CSS media query helpers for size tables.

Queries are max-width only, matching the upper-bound classification used by
:func:`sizing.sizes.bucket_for_width`. The stylesheet builder emits blocks from
the widest bucket down so that narrower queries come later and win the cascade.

Output is deterministic for straightforward snapshot testing.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Mapping, Tuple

from config import settings

from .sizes import CANONICAL_TABLE, SIZE_NAMES, SizeName, SizeRange

__all__ = [
    "UnknownSizeError",
    "StylesheetMeta",
    "media_query_max_width",
    "build_media_queries",
    "build_responsive_stylesheet",
]


class UnknownSizeError(KeyError):
    """Raised when stylesheet rules reference a bucket outside SIZE_NAMES."""


@dataclass(frozen=True)
class StylesheetMeta:
    blocks: int
    sizes: Tuple[SizeName, ...]


def media_query_max_width(
    bucket: SizeName, table: Mapping[SizeName, SizeRange] = CANONICAL_TABLE
) -> str:
    return settings.MEDIA_QUERY_TEMPLATE.format(max=table[bucket].max)


def build_media_queries(
    table: Mapping[SizeName, SizeRange] = CANONICAL_TABLE,
) -> Dict[SizeName, str]:
    return {name: media_query_max_width(name, table) for name in SIZE_NAMES}


def build_responsive_stylesheet(
    rules: Mapping[str, str], table: Mapping[SizeName, SizeRange] = CANONICAL_TABLE
) -> Tuple[str, StylesheetMeta]:
    """Wrap per-bucket CSS bodies in max-width media blocks.

    Parameters
    ----------
    rules: Mapping of bucket name to a CSS body (selectors and declarations).
        Blank bodies are skipped.
    table: Size table providing the max edge for each bucket.

    Returns
    -------
    (stylesheet, meta) tuple; blocks are ordered widest bucket first.
    """
    unknown = sorted(k for k in rules if k not in SIZE_NAMES)
    if unknown:
        raise UnknownSizeError(f"Unknown size name(s): {', '.join(unknown)}")
    blocks = []
    emitted = []
    for name in reversed(SIZE_NAMES):
        body = (rules.get(name) or "").strip()
        if not body:
            continue
        indented = "\n".join(f"  {line}" if line else line for line in body.splitlines())
        blocks.append(f"{media_query_max_width(name, table)} {{\n{indented}\n}}")
        emitted.append(name)
    stylesheet = "\n\n".join(blocks) + "\n" if blocks else ""
    return stylesheet, StylesheetMeta(blocks=len(blocks), sizes=tuple(emitted))
