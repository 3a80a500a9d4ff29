"""Command line access to the checklist stored in the configured backend.

Usage:
    corufa report
    corufa evaluate
    corufa export checklist.json
    corufa import checklist.json
    corufa bulk analisis.csv
    corufa --registry padron.csv report
    corufa reset
    corufa restore-limits
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from corufa.core.config import AppSettings
from corufa.core.exceptions import CorufaError
from corufa.core.logging import setup_logging
from corufa.ingest.bundle import export_bundle, export_filename, import_bundle
from corufa.persistence import create_repository
from corufa.report import render_report
from corufa.state import (
    apply_bulk_analysis,
    evaluate,
    load_registry,
    reset_dossier,
    restore_default_limits,
)

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="corufa", description="CORUFA pre-Plenario checklist")
    parser.add_argument("--registry", type=Path, default=None,
                        help="Driller registry file used to validate the registration number")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("report", help="Print the review report")
    sub.add_parser("evaluate", help="Print the evaluated dossier as JSON")

    export = sub.add_parser("export", help="Write the {dossier, limits} bundle")
    export.add_argument("path", type=Path, nargs="?", default=None)

    for name, help_text in (
        ("import", "Load a {dossier, limits} bundle"),
        ("bulk", "Load lab results from a two-line CSV"),
    ):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("path", type=Path)

    sub.add_parser("reset", help="Replace the dossier with a blank one")
    sub.add_parser("restore-limits", help="Restore the default reference limits")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = AppSettings()
    setup_logging(settings.log_level)
    repository = create_repository(settings)

    try:
        state = repository.load()
        if args.registry is not None:
            state = load_registry(state, args.registry.read_bytes())

        if args.command == "report":
            sys.stdout.write(render_report(state))
        elif args.command == "evaluate":
            sys.stdout.write(evaluate(state).model_dump_json(indent=2) + "\n")
        elif args.command == "export":
            path = args.path or Path(export_filename(state.exp))
            path.write_text(export_bundle(state), encoding="utf-8")
            logger.info("Exported bundle to %s", path)
        else:
            if args.command == "import":
                state = import_bundle(state, args.path.read_bytes())
            elif args.command == "bulk":
                state = apply_bulk_analysis(state, args.path.read_bytes())
            elif args.command == "reset":
                state = reset_dossier(state)
            elif args.command == "restore-limits":
                state = restore_default_limits(state)
            repository.save(state)
    except (CorufaError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
