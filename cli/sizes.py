"""Device sizes CLI.

Prints the size table resolved from optional breakpoint overrides, optionally
classifying a width and listing the max-width media query for each bucket.

Features:
 - Overrides via ``--xsmall/--small/--medium/--xlarge/--xxlarge``.
 - Falls back to the ``DEVICE_SIZES_BREAKPOINTS`` environment variable (JSON
   object) when no override flag is given.
 - Emits either a human-readable table or JSON (via ``--json``).
 - Exit code 0 when the resolved table is consistent, 1 when the consistency
   report has errors, 2 on invalid override configuration.

Example:
  device-sizes --xsmall 300 --small 600 --medium 900 --width 750 --media --json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Dict

from config import settings
from sizing import (
    SIZE_NAMES,
    Breakpoints,
    BreakpointConfigError,
    bucket_for_width,
    build_media_queries,
    copy_table,
    run_stages,
    table_to_dict,
    validate_table,
)

_log = logging.getLogger(__name__)

_OVERRIDE_FLAGS = ("xsmall", "small", "medium", "xlarge", "xxlarge")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="device-sizes", description="Resolve responsive device size buckets"
    )
    for name in _OVERRIDE_FLAGS:
        p.add_argument(f"--{name}", type=int, help=f"Max width override for {name} (pixels)")
    p.add_argument("--width", type=int, help="Classify this width against the resolved table")
    p.add_argument("--media", action="store_true", help="Include max-width media queries")
    p.add_argument("--json", action="store_true", help="Emit JSON instead of human-readable text")
    p.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return p.parse_args(argv)


def _collect_overrides(args: argparse.Namespace) -> Breakpoints:
    flags = {name: getattr(args, name) for name in _OVERRIDE_FLAGS if getattr(args, name) is not None}
    if flags:
        return Breakpoints.from_mapping(flags)
    env = settings.load_env_breakpoints()
    if env:
        _log.info("Using breakpoint overrides from %s", settings.BREAKPOINTS_ENV_VAR)
    return Breakpoints.from_mapping(env)


def build_report(overrides: Breakpoints, width: int | None = None, media: bool = False) -> Dict[str, Any]:
    _, draft = run_stages(overrides)[-1]
    table = copy_table(draft.sizes)
    validation = validate_table(table, recomputed=draft.touched)
    report: Dict[str, Any] = {
        "overrides": overrides.to_dict(),
        "sizes": table_to_dict(table),
        "consistency": {
            "errors": validation.errors,
            "warnings": validation.warnings,
            "stats": validation.stats,
            "clean": validation.is_clean(),
        },
    }
    if width is not None:
        report["width"] = {"value": width, "size": bucket_for_width(width, table)}
    if media:
        report["media"] = build_media_queries(table)
    return report


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    level = logging.DEBUG if args.verbose else settings.parse_log_level(settings.LOG_LEVEL)
    if level is None:
        print(f"Unknown log level {settings.LOG_LEVEL!r}; using WARNING", file=sys.stderr)
        level = logging.WARNING
    logging.basicConfig(level=level)
    try:
        overrides = _collect_overrides(args)
    except BreakpointConfigError as exc:
        print(f"Invalid breakpoint overrides: {exc}", file=sys.stderr)
        return 2
    report = build_report(overrides, width=args.width, media=args.media)
    consistency = report["consistency"]
    exit_code = 0 if consistency["clean"] else 1
    if args.json:
        print(json.dumps(report, ensure_ascii=False, indent=2))
        return exit_code

    print("Device Sizes:")
    for name in SIZE_NAMES:
        size = report["sizes"][name]
        line = f"  {name:<8} min={size['min']:<5} default={size['default']:<5} max={size['max']}"
        if args.media:
            line += f"  {report['media'][name]}"
        print(line)
    if "width" in report:
        print(f"Width {report['width']['value']}px -> {report['width']['size']}")
    status = "CLEAN" if consistency["clean"] else "ERRORS"
    print(f"Consistency: {status}")
    for err in consistency["errors"]:
        print(f"  ! {err}")
    return exit_code


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
