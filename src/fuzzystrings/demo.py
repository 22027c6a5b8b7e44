# src/fuzzystrings/demo.py
import argparse
import logging
import sys
from typing import Any, Dict, List, Optional

from .errors import InvalidInput
from .matching import METRICS, best_match, get_metric, rank_all
from .utils import (
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    DataDirNotFound,
    load_config,
)

log = logging.getLogger(__name__)

DEMO_CONFIG = "demo"


def _validate_demo(data: Dict[str, Any]) -> Dict[str, Any]:
    """Does: Check the demo config shape and fill defaults."""
    query = data.get("query")
    if not isinstance(query, str) or not query.strip():
        raise ValueError("'query' must be a non-empty string")
    candidates = data.get("candidates")
    if not isinstance(candidates, list) or not all(isinstance(c, str) for c in candidates):
        raise ValueError("'candidates' must be a list of strings")
    metric = data.get("metric", "blended")
    get_metric(metric)
    ignore_case = data.get("ignore_case", False)
    if not isinstance(ignore_case, bool):
        raise ValueError("'ignore_case' must be a boolean")
    return {"query": query, "candidates": candidates, "metric": metric, "ignore_case": ignore_case}


def load_demo_settings() -> Dict[str, Any]:
    return load_config(DEMO_CONFIG, validator=_validate_demo)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fuzzystrings-demo",
        description="Rank candidate strings by similarity to a query.",
    )
    parser.add_argument("query", nargs="?", help="String to match (default: bundled demo query)")
    parser.add_argument(
        "-c",
        "--candidate",
        action="append",
        dest="candidates",
        help="Candidate string; repeat for several (default: bundled demo candidates)",
    )
    parser.add_argument(
        "-m",
        "--metric",
        choices=sorted(METRICS),
        help="Similarity metric (default: from demo config, usually 'blended')",
    )
    parser.add_argument("-i", "--ignore-case", action="store_true", dest="ignore_case")
    parser.add_argument("--best", action="store_true", help="Print only the best match")
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """CLI demo: score candidates against a query and print `score: text` lines."""
    args = build_parser().parse_args(argv)
    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(asctime)s [%(name)s][%(levelname)s] %(message)s")

    try:
        settings: Dict[str, Any] = {"metric": "blended", "ignore_case": False}
        if args.query is None or not args.candidates:
            settings = load_demo_settings()

        query = args.query if args.query is not None else settings["query"]
        candidates = args.candidates or settings["candidates"]
        metric_name = args.metric or settings["metric"]
        ignore_case = args.ignore_case or settings["ignore_case"]
        metric = get_metric(metric_name)

        if args.debug:
            log.debug(
                "[DEMO] query=%r metric=%s ignore_case=%s candidates=%d",
                query,
                metric_name,
                ignore_case,
                len(candidates),
            )

        if args.best:
            matches = [best_match(query, candidates, metric, ignore_case, debug=args.debug)]
        else:
            matches = rank_all(query, candidates, metric, ignore_case, debug=args.debug)
    except (InvalidInput, KeyError, DataDirNotFound, ConfigFileNotFound, ConfigParseError, ConfigTypeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for m in matches:
        print(f"{m.score}: {m.text}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
