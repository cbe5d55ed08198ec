"""
cli.py - command line front end for the hotspot detector
Features:
- Index a wordlist of leaked passwords (one per line)
- Check one or more candidate passwords and print their hotspots
- Settings from a JSON config file, overridable by flags
- Uses Rich for tables and logging

Usage:
    hotspot-detector --wordlist leaks.txt --min-n 3 --max-n 6 mypass123 hunter2
"""

import argparse
import logging
from typing import Iterator, List, Optional

from rich.console import Console
from rich.markup import escape

from hotspot_detector.core.detector import DetectorConfig, DLBHotspotDetector
from hotspot_detector.report import render_hotspots
from hotspot_detector.utils.config_manager import Config
from hotspot_detector.utils.logger_utils import Log, setup_logging

logger = logging.getLogger(__name__)

console = Console()


def read_wordlist(path: str) -> Iterator[str]:
    """Yield passwords from a wordlist file, dropping the line terminator only."""
    # undecodable bytes stay as lone surrogates, never dropped or joined
    with open(path, "r", encoding="utf-8", errors="surrogateescape") as fh:
        for line in fh:
            pw = line.rstrip("\r\n")
            if pw:
                yield pw


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hotspot-detector",
        description="Report leaked-password n-grams found in candidate passwords.",
    )
    parser.add_argument("candidates", nargs="*", help="candidate passwords to check")
    parser.add_argument("--wordlist", "-w", action="append", default=[], help="leaked password file (repeatable)")
    parser.add_argument("--min-n", type=int, default=None, help="shortest n-gram length")
    parser.add_argument("--max-n", type=int, default=None, help="longest n-gram length")
    parser.add_argument("--config", default="hotspot_config.json", help="JSON settings file")
    parser.add_argument("--no-corpus-stats", action="store_true", help="hide corpus columns")
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING or ERROR")
    parser.add_argument("--show-config", action="store_true", help="print effective settings and exit")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    cfg = Config(args.config)
    if args.show_config:
        cfg.show()
        return 0

    try:
        setup_logging(args.log_level or cfg.data["log_level"], console=console)
        base = cfg.detector_config()
        det_cfg = DetectorConfig(
            min_n=base.min_n if args.min_n is None else args.min_n,
            max_n=base.max_n if args.max_n is None else args.max_n,
        )
    except ValueError as e:
        console.print(f"[red]error:[/red] {escape(str(e))}")
        return 2

    detector = DLBHotspotDetector(det_cfg)
    for path in args.wordlist:
        try:
            with Log.time_block(f"index {path}"):
                n = detector.add_leaked_passwords(read_wordlist(path))
        except OSError as e:
            console.print(f"[red]error:[/red] cannot read wordlist {escape(path)}: {escape(str(e))}")
            return 1
        logger.info("indexed %d passwords from %s", n, path)

    logger.info(
        "index holds %d distinct n-grams from %d passwords",
        detector.size(),
        detector.password_count,
    )

    show_stats = cfg.data["show_corpus_stats"] and not args.no_corpus_stats
    for candidate in args.candidates:
        hotspots = detector.hotspots_in(candidate)
        if not hotspots:
            console.print(f"[green]{escape(repr(candidate))}: no hotspots[/green]")
            continue
        console.print(render_hotspots(hotspots, title=escape(repr(candidate)), show_corpus_stats=show_stats))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
