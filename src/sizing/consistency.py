"""Size table consistency checks.

Reports problems in a size table instead of raising, so callers (CLI, tests,
embedding UIs) can decide how strict to be.

Rules:
 - all six buckets present (error otherwise),
 - every bucket satisfies ``min <= default <= max`` (error),
 - each bucket starts one pixel after the previous bucket's max. A gap or
   overlap is an error when both neighbours were recomputed, otherwise a
   warning, since untouched buckets are not re-chained. Pass ``recomputed``
   (e.g. from :func:`sizing.breakpoints.recomputed_sizes`) to name the
   rewritten buckets; without it a bucket counts as untouched when its values
   equal the canonical ones, which also matches a recomputed bucket that
   happens to land on canonical values,
 - the first bucket starting above 0 is a warning (an xsmall override always
   moves its min to half its max).

The canonical table therefore reports one warning: ``large.min`` (990)
overlaps ``medium.max`` (991).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Optional

from .sizes import CANONICAL_TABLE, SIZE_NAMES, SizeRange

__all__ = ["TableConsistencyResult", "validate_table"]


@dataclass
class TableConsistencyResult:
    """Container for validation findings.

    Attributes
    ----------
    errors: list[str]
        Missing buckets, disordered ranges, gaps/overlaps between recomputed
        buckets.
    warnings: list[str]
        Non-fatal findings (canonical adjacency, unknown extra keys).
    stats: dict[str, int]
        ``buckets`` checked and ``span`` covered from first min to last max.
    """

    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    stats: Dict[str, int] = field(default_factory=dict)

    def is_clean(self) -> bool:
        return not self.errors


def _is_canonical(name: str, size: SizeRange) -> bool:
    return CANONICAL_TABLE[name] == size  # type: ignore[index]


def validate_table(
    table: Mapping[str, SizeRange], recomputed: Optional[Iterable[str]] = None
) -> TableConsistencyResult:
    res = TableConsistencyResult()
    touched = set(recomputed) if recomputed is not None else None

    def _untouched(name: str) -> bool:
        if touched is None:
            return _is_canonical(name, table[name])
        return name not in touched

    missing = [name for name in SIZE_NAMES if name not in table]
    if missing:
        res.errors.append(f"Missing buckets: {', '.join(missing)}")
    extra = sorted(k for k in table if k not in SIZE_NAMES)
    if extra:
        res.warnings.append(f"Unknown buckets ignored: {', '.join(extra)}")

    present = [name for name in SIZE_NAMES if name in table]
    res.stats["buckets"] = len(present)
    if not present:
        res.stats["span"] = 0
        return res

    first = table[present[0]]
    if present[0] == SIZE_NAMES[0] and first.min != 0:
        res.warnings.append(f"{present[0]} starts at {first.min}, widths below are unclaimed")

    for name in present:
        size = table[name]
        if not size.is_ordered():
            res.errors.append(
                f"{name} range out of order: min={size.min} default={size.default} max={size.max}"
            )

    for prev, nxt in zip(present, present[1:]):
        expected = table[prev].max + 1
        actual = table[nxt].min
        if actual == expected:
            continue
        if actual > expected:
            msg = f"Gap between {prev} and {nxt}: {expected}..{actual - 1}"
        else:
            msg = f"Overlap between {prev} and {nxt}: {actual}..{expected - 1}"
        if _untouched(prev) or _untouched(nxt):
            res.warnings.append(msg)
        else:
            res.errors.append(msg)

    res.stats["span"] = max(0, table[present[-1]].max - first.min + 1)
    return res
