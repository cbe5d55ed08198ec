# hotspot.py
# Read-only record describing one hotspot n-gram found in a candidate password.

from __future__ import annotations
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Hotspot:
    """
    A frequent leaked-password substring matched inside a candidate.

    Corpus statistics (snapshot of the index at lookup time):
      freq, doc_freq, begin_count, middle_count, end_count
    Candidate statistics (aggregated over every occurrence in the candidate):
      candidate_at_begin, candidate_middle_count, candidate_at_end

    Two hotspots are equal when their n-grams are equal, so a set never
    holds the same substring twice.
    """

    ngram: str
    freq: int = field(default=0, compare=False)
    doc_freq: int = field(default=0, compare=False)
    begin_count: int = field(default=0, compare=False)
    middle_count: int = field(default=0, compare=False)
    end_count: int = field(default=0, compare=False)
    candidate_at_begin: bool = field(default=False, compare=False)
    candidate_middle_count: int = field(default=0, compare=False)
    candidate_at_end: bool = field(default=False, compare=False)

    def __str__(self) -> str:
        return (
            f"{self.ngram} (freq={self.freq}, docFreq={self.doc_freq}, "
            f"begin={self.begin_count}, middle={self.middle_count}, end={self.end_count}, "
            f"candBegin={str(self.candidate_at_begin).lower()}, "
            f"candMiddleCount={self.candidate_middle_count}, "
            f"candEnd={str(self.candidate_at_end).lower()})"
        )
