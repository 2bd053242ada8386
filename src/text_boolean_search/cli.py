"""CLI for running one boolean query against a corpus directory."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
import json
import logging
from pathlib import Path
import sys

from pydantic import ValidationError

from text_boolean_search.config import Settings
from text_boolean_search.observability.logging import configure_logging
from text_boolean_search.observability.metrics import get_metrics
from text_boolean_search.observability.tracing import init_tracing
from text_boolean_search.search_engine import SearchEngine


logger = logging.getLogger(__name__)


def build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Index the .txt files under ROOT and print the documents matching QUERY",
    )
    parser.add_argument("root", type=Path, help="Corpus root directory")
    parser.add_argument("query", help="Boolean query, e.g. 'cat and dog not bird'")
    parser.add_argument(
        "--explain",
        action="store_true",
        help="Log the order in which the query operators are resolved",
    )
    parser.add_argument(
        "--galloping",
        action="store_true",
        help="Use the skipping intersection for AND",
    )
    parser.add_argument(
        "--extension",
        help="Document file suffix (default: settings.document_extension)",
    )
    parser.add_argument(
        "--log-level",
        help="Root log level (default: settings.log_level)",
    )
    parser.add_argument(
        "--plain-logs",
        action="store_true",
        help="Human-readable logs instead of JSON",
    )
    parser.add_argument(
        "--metrics",
        action="store_true",
        help="Dump Prometheus metrics to stderr after the search",
    )
    return parser


def _build_settings(args: argparse.Namespace) -> Settings:
    overrides: dict[str, object] = {}
    if args.galloping:
        overrides["intersection_strategy"] = "galloping"
    if args.extension:
        overrides["document_extension"] = args.extension
    if args.log_level:
        overrides["log_level"] = args.log_level
    if args.plain_logs:
        overrides["log_json"] = False
    return Settings(**overrides)


def _print_matches(engine: SearchEngine, matches: Sequence[int]) -> None:
    for doc_id in matches:
        payload = {"id": doc_id, "name": engine.resolve(doc_id)}
        sys.stdout.write(json.dumps(payload, sort_keys=True) + "\n")


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_argument_parser()
    args = parser.parse_args(argv)

    try:
        settings = _build_settings(args)
    except ValidationError as exc:
        configure_logging("INFO", json_output=False)
        logger.error("Invalid settings: %s", exc)
        return 1

    configure_logging(settings.log_level, json_output=settings.log_json)
    init_tracing()

    engine = SearchEngine(settings)
    if args.explain:
        logger.info("Resolution order: %s", engine.explain(args.query) or "<empty>")

    matches = engine.search(args.root, args.query)
    _print_matches(engine, matches)
    logger.info("%d document(s) matched", len(matches))
    if args.metrics:
        sys.stderr.write(get_metrics().decode("utf-8"))
    return 0


if __name__ == "__main__":
    sys.exit(main())
