"""CLI entrypoint for the country shape map spec builder."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from .config import AppConfig, load_config
from .country_codes import load_country_codes, resolve_country_code
from .preview import write_preview_html
from .renderer import format_spec_lines, run_build_spec
from .util import setup_logging, write_json
from .validate import Validator, format_report_lines

LOGGER = logging.getLogger("shapemap.cli")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shapemap",
        description="Build Vega-Lite country shape maps from tabular results.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    def add_common(p: argparse.ArgumentParser) -> None:
        p.add_argument(
            "--config",
            default="config.yaml",
            help="Path to YAML config. Built-in defaults are used when the file is absent.",
        )
        p.add_argument("--verbose", action="store_true", help="Enable debug logs.")
        p.add_argument("--quiet", action="store_true", help="Only print warnings and errors.")

    spec_p = subparsers.add_parser("spec", help="Build a map spec JSON from a result file.")
    add_common(spec_p)
    spec_p.add_argument("--result", required=True, help="YAML/JSON result document.")
    spec_p.add_argument(
        "--output",
        default=None,
        help="Spec JSON path. Defaults to <output_dir>/<result name>.vl.json.",
    )

    preview_p = subparsers.add_parser("preview", help="Build a map spec and write an HTML preview.")
    add_common(preview_p)
    preview_p.add_argument("--result", required=True, help="YAML/JSON result document.")
    preview_p.add_argument(
        "--output",
        default=None,
        help="HTML path. Defaults to <output_dir>/<result name>.html.",
    )
    preview_p.add_argument("--title", default=None, help="Page title.")

    lookup_p = subparsers.add_parser("lookup", help="Resolve country names to numeric ids.")
    add_common(lookup_p)
    lookup_p.add_argument("names", nargs="+", help="Country display names (exact match).")

    validate_p = subparsers.add_parser("validate", help="Validate config and lookup assets.")
    add_common(validate_p)
    validate_p.add_argument(
        "--strict",
        action="store_true",
        help="Treat country codes missing from a local world atlas as errors.",
    )

    return parser


def _load_and_setup(args: argparse.Namespace) -> AppConfig:
    cfg_path = Path(args.config)
    cfg = load_config(cfg_path) if cfg_path.exists() else AppConfig.default()
    log_path = cfg.paths.logs_dir / "shapemap.log" if cfg.source_path is not None else None
    setup_logging(log_path, verbose=args.verbose, quiet=args.quiet)
    if cfg.source_path is None:
        LOGGER.debug("Config %s not found; using built-in defaults.", cfg_path)
    return cfg


def _run_spec(cfg: AppConfig, *, result_path: Path, output: str | None) -> int:
    report = run_build_spec(cfg, result_path=result_path)
    for line in format_spec_lines(report):
        LOGGER.info(line)
    if not report.ok or report.spec is None:
        return 1

    output_path = Path(output) if output else cfg.paths.output_dir / f"{result_path.stem}.vl.json"
    write_json(output_path, report.spec, sort_keys=False)
    LOGGER.info("Shape map spec written to %s", output_path)
    return 0


def _run_preview(
    cfg: AppConfig,
    *,
    result_path: Path,
    output: str | None,
    title: str | None,
) -> int:
    report = run_build_spec(cfg, result_path=result_path)
    for line in format_spec_lines(report):
        LOGGER.info(line)
    if not report.ok or report.spec is None:
        return 1

    output_path = Path(output) if output else cfg.paths.output_dir / f"{result_path.stem}.html"
    write_preview_html(report.spec, output_path, title=title or result_path.stem)
    LOGGER.info("Shape map preview written to %s", output_path)
    return 0


def _run_lookup(cfg: AppConfig, *, names: Sequence[str]) -> int:
    table = load_country_codes(cfg.paths.country_codes)
    unresolved = 0
    for name in names:
        code = resolve_country_code(name, table)
        if code is None:
            unresolved += 1
            LOGGER.warning("%s -> unresolved", name)
        else:
            LOGGER.info("%s -> %d", name, code)
    return 1 if unresolved else 0


def _run_validate(cfg: AppConfig, *, strict: bool) -> int:
    report = Validator(cfg).run(strict=strict)
    for line in format_report_lines(report):
        LOGGER.info(line)
    return 0 if report.ok else 1


def _dispatch(args: argparse.Namespace) -> int:
    cfg = _load_and_setup(args)
    command = str(args.command)
    if command == "spec":
        return _run_spec(cfg, result_path=Path(args.result), output=args.output)
    if command == "preview":
        return _run_preview(cfg, result_path=Path(args.result), output=args.output, title=args.title)
    if command == "lookup":
        return _run_lookup(cfg, names=[str(item) for item in args.names])
    if command == "validate":
        return _run_validate(cfg, strict=bool(args.strict))
    raise ValueError(f"Unknown command: {command}")


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    try:
        return _dispatch(args)
    except (OSError, ValueError) as exc:
        LOGGER.error("%s failed: %s", args.command, exc)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
