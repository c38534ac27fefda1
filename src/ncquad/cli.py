from __future__ import annotations

import argparse
import csv
import json
import sys
from pathlib import Path

from ncquad.config import get_current_config, load_calc_config
from ncquad.errors import ConfigError
from ncquad.logging_setup import LOG_LEVELS, setup_logging
from ncquad.pipeline import calculate
from ncquad.quadrature.types import RULE_NAMES

_HEADER_CELLS = {"x", "fx", "f(x)", "y"}


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        description="Newton-Cotes integral and Lagrange polynomial from sampled (x, f(x)) points."
    )
    ap.add_argument(
        "--point",
        action="append",
        default=[],
        metavar="X,FX",
        help="Sample point as 'x,fx'. Repeat in order; the first and last x are the integration bounds.",
    )
    ap.add_argument("--input", default="", help="CSV with two columns x,fx (header optional). Rows follow --point values.")
    ap.add_argument("--rule", choices=list(RULE_NAMES), default=None, help="Quadrature rule (default: from config, else trapezoidal).")
    ap.add_argument("--config", default="", help="YAML or JSON config with defaults (rule, logging).")
    ap.add_argument("--json", action="store_true", help="Emit a JSON payload instead of text lines.")
    ap.add_argument("--out", default="", help="Output path (default: stdout).")
    ap.add_argument("--log_level", choices=list(LOG_LEVELS), default=None, help="Log level (default: from config, else warning).")
    ap.add_argument("--json_logs", action="store_true", default=None, help="Emit logs as JSON lines on stderr.")
    return ap


def _split_point(text: str) -> list[str]:
    return str(text).split(",")


def read_points_csv(path: str | Path) -> list[list[str]]:
    rows: list[list[str]] = []
    with Path(path).open("r", encoding="utf-8", newline="") as f:
        for idx, row in enumerate(csv.reader(f)):
            cells = [c.strip() for c in row]
            if not any(cells):
                continue
            if idx == 0 and cells and cells[0].lower() in _HEADER_CELLS:
                continue
            rows.append(cells)
    return rows


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    try:
        base_cfg = load_calc_config(args.config) if args.config else get_current_config()
        cfg = base_cfg.with_overrides(
            rule=args.rule,
            log_level=args.log_level,
            json_logs=args.json_logs,
        )
    except FileNotFoundError as exc:
        sys.stderr.write(f"Config error: file not found: {exc}\n")
        return 1
    except ConfigError as exc:
        sys.stderr.write(f"Config error: {exc}\n")
        return 1
    setup_logging(cfg.log_level, json_output=cfg.json_logs)

    raw_pairs: list[list[str]] = [_split_point(p) for p in args.point]
    if args.input:
        raw_pairs.extend(read_points_csv(args.input))

    result = calculate(raw_pairs, cfg.rule)

    if args.json:
        text = json.dumps(result.to_payload(), ensure_ascii=False, sort_keys=True, indent=2)
    else:
        text = "\n".join(result.messages()) if result.ok else ""
    if not result.ok and not args.json:
        sys.stderr.write(result.error_message + "\n")

    if text:
        if args.out:
            Path(args.out).write_text(text + "\n", encoding="utf-8")
        else:
            sys.stdout.write(text + "\n")
    return 0 if result.ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
