# report.py - rich table rendering for hotspot lookups

from typing import Iterable

from rich import box
from rich.table import Table
from rich.text import Text

from hotspot_detector.core.hotspot import Hotspot


def _flag(value: bool) -> str:
    return "[green]yes[/green]" if value else "[dim]no[/dim]"


def render_hotspots(
    hotspots: Iterable[Hotspot], title: str = "Hotspots", show_corpus_stats: bool = True
) -> Table:
    """
    Build a table with one row per hotspot.
    Candidate columns always shown; corpus columns (freq, docFreq, begin/middle/end) are optional.
    """
    table = Table(title=title, box=box.SIMPLE_HEAVY)
    table.add_column("n-gram", style="bold cyan")
    if show_corpus_stats:
        for name in ("freq", "docFreq", "begin", "middle", "end"):
            table.add_column(name, justify="right")
    table.add_column("cand. begin", justify="center")
    table.add_column("cand. middle", justify="right")
    table.add_column("cand. end", justify="center")

    for h in hotspots:
        # passwords may contain [brackets], keep them out of markup parsing
        row = [Text(h.ngram)]
        if show_corpus_stats:
            row += [
                str(h.freq),
                str(h.doc_freq),
                str(h.begin_count),
                str(h.middle_count),
                str(h.end_count),
            ]
        row += [
            _flag(h.candidate_at_begin),
            str(h.candidate_middle_count),
            _flag(h.candidate_at_end),
        ]
        table.add_row(*row)
    return table
