"""Canonical device size buckets and width classification.

The pixel-width axis is split into six named buckets, ordered from the
narrowest (``xsmall``) to the widest (``xxlarge``). Each bucket carries an
inclusive ``min``/``max`` range plus a ``default`` width used wherever a single
concrete pixel value is needed (e.g. rendering a preview at that size).

Canonical Table
---------------
 - xsmall:  0 .. 320     (default 160)
 - small:   321 .. 640   (default 321)
 - medium:  641 .. 991   (default 642)
 - large:   990 .. 1200  (default 991)
 - xlarge:  1201 .. 1920 (default 1440)
 - xxlarge: 1921 .. 9999 (default 2560)

``large.min`` (990) sits below ``medium.max`` (991). The overlap is kept as-is;
derived tables produced by :mod:`sizing.breakpoints` recompute their edges and
do not inherit it. Classification is first-match on the upper bound, so widths
990 and 991 resolve to ``medium``.

Pure-Python, no GUI dependency.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from types import MappingProxyType
from typing import Dict, Literal, Mapping, Tuple

from config import settings

__all__ = [
    "SizeName",
    "SIZE_NAMES",
    "SizeRange",
    "SizeTable",
    "CANONICAL_TABLE",
    "copy_table",
    "table_to_dict",
    "width_for_bucket",
    "bucket_for_width",
]

SizeName = Literal["xsmall", "small", "medium", "large", "xlarge", "xxlarge"]

SIZE_NAMES: Tuple[SizeName, ...] = ("xsmall", "small", "medium", "large", "xlarge", "xxlarge")


@dataclass(frozen=True)
class SizeRange:
    """Pixel range of one bucket.

    Attributes
    ----------
    min: int
        Inclusive lower pixel boundary.
    default: int
        Representative width for the bucket (not necessarily the midpoint).
    max: int
        Inclusive upper pixel boundary.
    """

    min: int
    default: int
    max: int

    def contains(self, width: int) -> bool:
        return self.min <= width <= self.max

    def is_ordered(self) -> bool:
        return self.min <= self.default <= self.max

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)


SizeTable = Dict[SizeName, SizeRange]

CANONICAL_TABLE: Mapping[SizeName, SizeRange] = MappingProxyType(
    {
        "xsmall": SizeRange(min=0, default=160, max=320),
        "small": SizeRange(min=321, default=321, max=640),
        "medium": SizeRange(min=641, default=642, max=991),
        # Overlaps medium.max by one pixel; kept verbatim
        "large": SizeRange(min=990, default=991, max=1200),
        "xlarge": SizeRange(min=1201, default=1440, max=1920),
        "xxlarge": SizeRange(min=1921, default=2560, max=settings.SENTINEL_MAX),
    }
)


def copy_table(table: Mapping[SizeName, SizeRange] = CANONICAL_TABLE) -> SizeTable:
    """Return an independent table in ascending bucket order.

    ``SizeRange`` is immutable, so a fresh dict is enough for a deep copy.
    """
    return {name: table[name] for name in SIZE_NAMES}


def table_to_dict(table: Mapping[SizeName, SizeRange]) -> Dict[str, Dict[str, int]]:
    return {name: table[name].to_dict() for name in SIZE_NAMES}


def width_for_bucket(bucket: SizeName, table: Mapping[SizeName, SizeRange] = CANONICAL_TABLE) -> int:
    return table[bucket].default


def bucket_for_width(width: int, table: Mapping[SizeName, SizeRange] = CANONICAL_TABLE) -> SizeName:
    """Return the first bucket (ascending) whose max is >= ``width``.

    Upper bounds are inclusive. Negative widths are not rejected and fall into
    the first bucket; widths past every max fall back to ``xxlarge``.
    """
    for name in SIZE_NAMES:
        if width <= table[name].max:
            return name
    return "xxlarge"
