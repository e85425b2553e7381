"""Derive a size table from custom breakpoint overrides.

Callers supply the upper edge (``max``) of some buckets; every other edge is
recomputed relationally so the touched buckets tile the pixel axis without gaps
or overlaps. ``large`` is never supplied directly: its max follows the
``xlarge`` override when one is given.

Pipeline
--------
Resolution threads an immutable :class:`SizeDraft` through an ordered tuple of
stages. Each stage takes the previous draft plus the overrides and returns a
new draft; a stage may halt the pipeline, in which case later stages are
skipped. Stages (in order):

 1. xsmall   - ``{max: xsmall, min: xsmall // 2}`` when overridden
 2. require  - halt unless both ``small`` and ``medium`` are overridden
 3. small    - min chains off xsmall only when xsmall was overridden
 4. medium   - min = small.max + 1
 5. large    - min = medium.max + 1, max = xlarge override or canonical
 6. xlarge   - only when overridden; max = xxlarge override or canonical
 7. xxlarge  - only when overridden; max stays at the sentinel

Every recomputed bucket uses ``default = min + 1``. Overrides are tested for
truthiness, so ``0`` behaves exactly like a missing value.

Known quirks (kept; intent could not be confirmed):
 - small falls back to ``small // 2`` for its min when xsmall is not
   overridden, leaving a gap after canonical xsmall.max (320).
 - xxlarge picks its min from xlarge only when xlarge itself was overridden.
 - Overrides are not sorted or validated; out-of-order values can produce a
   bucket whose min exceeds its max (see :mod:`sizing.consistency`).

Resolution never raises: a mapping value that cannot be read as an integer
width is logged and treated as absent. Strict parsing is left to the
configuration boundary (`Breakpoints.from_mapping` with ``strict=True``).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields, replace
from types import MappingProxyType
from typing import Any, Callable, Dict, FrozenSet, List, Mapping, Optional, Tuple, Union

from config.settings import BreakpointConfigError

from .sizes import CANONICAL_TABLE, SizeName, SizeRange, SizeTable, copy_table

_log = logging.getLogger(__name__)

__all__ = [
    "Breakpoints",
    "BreakpointConfigError",
    "SizeDraft",
    "resolve_breakpoints",
    "get_sizes_for_breakpoints",
    "run_stages",
    "recomputed_sizes",
]


@dataclass(frozen=True)
class Breakpoints:
    """Partial set of breakpoint overrides (pixel max edge per bucket)."""

    xsmall: Optional[int] = None
    small: Optional[int] = None
    medium: Optional[int] = None
    xlarge: Optional[int] = None
    xxlarge: Optional[int] = None

    def is_empty(self) -> bool:
        return not any(getattr(self, f.name) for f in fields(self))

    def to_dict(self) -> Dict[str, int]:
        return {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name)}

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], strict: bool = True) -> "Breakpoints":
        """Build overrides from a plain mapping (JSON, env, CLI).

        Unknown keys are ignored. ``None`` counts as absent. Integral strings
        and floats are accepted; anything else raises BreakpointConfigError
        when ``strict``, otherwise it is logged and treated as absent.
        """
        known = [f.name for f in fields(cls)]
        ignored = sorted(k for k in data if k not in known)
        if ignored:
            _log.debug("Ignoring unknown breakpoint keys: %s", ", ".join(ignored))
        values = {}
        for key in known:
            if key not in data:
                continue
            try:
                values[key] = _coerce_width(key, data[key])
            except BreakpointConfigError:
                if strict:
                    raise
                _log.warning("Ignoring unreadable breakpoint %s=%r", key, data[key])
        return cls(**values)


def _coerce_width(key: str, value: Any) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, bool):
        raise BreakpointConfigError(f"Breakpoint {key} must be an integer width, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    raise BreakpointConfigError(f"Breakpoint {key} must be an integer width, got {value!r}")


@dataclass(frozen=True)
class SizeDraft:
    """Immutable intermediate table passed between pipeline stages."""

    sizes: Mapping[SizeName, SizeRange]
    halted: bool = False
    # Buckets written by a stage, even when the values equal the canonical ones
    touched: FrozenSet[SizeName] = frozenset()

    @classmethod
    def from_table(cls, table: Mapping[SizeName, SizeRange]) -> "SizeDraft":
        return cls(sizes=MappingProxyType(copy_table(table)))

    def with_size(self, name: SizeName, size: SizeRange) -> "SizeDraft":
        updated = copy_table(self.sizes)
        updated[name] = size
        return replace(self, sizes=MappingProxyType(updated), touched=self.touched | {name})

    def halt(self) -> "SizeDraft":
        return replace(self, halted=True)


Stage = Callable[[SizeDraft, Breakpoints], SizeDraft]


def _span(min_width: int, max_width: int) -> SizeRange:
    return SizeRange(min=min_width, default=min_width + 1, max=max_width)


def _stage_xsmall(draft: SizeDraft, bp: Breakpoints) -> SizeDraft:
    if not bp.xsmall:
        return draft
    return draft.with_size("xsmall", _span(bp.xsmall // 2, bp.xsmall))


def _stage_require_small_medium(draft: SizeDraft, bp: Breakpoints) -> SizeDraft:
    if not bp.small or not bp.medium:
        _log.debug("small/medium not both overridden; keeping canonical small..xxlarge")
        return draft.halt()
    return draft


def _stage_small(draft: SizeDraft, bp: Breakpoints) -> SizeDraft:
    # Depends on whether xsmall was overridden, not on the canonical xsmall edge
    if bp.xsmall:
        min_width = draft.sizes["xsmall"].max + 1
    else:
        min_width = bp.small // 2
    return draft.with_size("small", _span(min_width, bp.small))


def _stage_medium(draft: SizeDraft, bp: Breakpoints) -> SizeDraft:
    return draft.with_size("medium", _span(draft.sizes["small"].max + 1, bp.medium))


def _stage_large(draft: SizeDraft, bp: Breakpoints) -> SizeDraft:
    max_width = bp.xlarge or CANONICAL_TABLE["large"].max
    return draft.with_size("large", _span(draft.sizes["medium"].max + 1, max_width))


def _stage_xlarge(draft: SizeDraft, bp: Breakpoints) -> SizeDraft:
    if not bp.xlarge:
        return draft
    max_width = bp.xxlarge or CANONICAL_TABLE["xlarge"].max
    return draft.with_size("xlarge", _span(draft.sizes["large"].max + 1, max_width))


def _stage_xxlarge(draft: SizeDraft, bp: Breakpoints) -> SizeDraft:
    if not bp.xxlarge:
        return draft
    # Chains off xlarge only when xlarge was overridden
    if bp.xlarge:
        min_width = draft.sizes["xlarge"].max + 1
    else:
        min_width = draft.sizes["large"].max + 1
    return draft.with_size("xxlarge", _span(min_width, CANONICAL_TABLE["xxlarge"].max))


_STAGES: Tuple[Tuple[str, Stage], ...] = (
    ("xsmall", _stage_xsmall),
    ("require", _stage_require_small_medium),
    ("small", _stage_small),
    ("medium", _stage_medium),
    ("large", _stage_large),
    ("xlarge", _stage_xlarge),
    ("xxlarge", _stage_xxlarge),
)


def _as_breakpoints(
    overrides: Union[Breakpoints, Mapping[str, Any], None],
) -> Breakpoints:
    if overrides is None:
        return Breakpoints()
    if isinstance(overrides, Breakpoints):
        return overrides
    return Breakpoints.from_mapping(overrides, strict=False)


def run_stages(
    overrides: Union[Breakpoints, Mapping[str, Any], None] = None,
) -> List[Tuple[str, SizeDraft]]:
    """Return ``(stage_name, draft)`` pairs for every stage that ran.

    The first entry is always ``("canonical", <copy of CANONICAL_TABLE>)``.
    """
    bp = _as_breakpoints(overrides)
    draft = SizeDraft.from_table(CANONICAL_TABLE)
    trail: List[Tuple[str, SizeDraft]] = [("canonical", draft)]
    if bp.is_empty():
        return trail
    for name, stage in _STAGES:
        draft = stage(draft, bp)
        trail.append((name, draft))
        if draft.halted:
            break
    _log.debug("Resolved breakpoints %s via stages %s", bp.to_dict(), [n for n, _ in trail[1:]])
    return trail


def resolve_breakpoints(
    overrides: Union[Breakpoints, Mapping[str, Any], None] = None,
) -> SizeTable:
    """Return a new size table with ``overrides`` applied.

    The result never aliases CANONICAL_TABLE or any earlier result.
    """
    _, draft = run_stages(overrides)[-1]
    return copy_table(draft.sizes)


def recomputed_sizes(
    overrides: Union[Breakpoints, Mapping[str, Any], None] = None,
) -> FrozenSet[SizeName]:
    """Return the buckets the pipeline rewrote for ``overrides``."""
    _, draft = run_stages(overrides)[-1]
    return draft.touched


get_sizes_for_breakpoints = resolve_breakpoints
