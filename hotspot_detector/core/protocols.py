# hotspot_detector/core/protocols.py
"""
Protocol interfaces for the hotspot detector.

The report/CLI/bench code depends on these Protocols rather than on
DLBHotspotDetector directly, so tests can swap in small fakes.
"""

from __future__ import annotations

from typing import AbstractSet, Protocol, runtime_checkable
from typing_extensions import TypedDict

from hotspot_detector.core.hotspot import Hotspot


# Typed structures ------------------------------------------------------------

class NgramStats(TypedDict):
    """
    Corpus-wide counters stored for one indexed n-gram.

    Example:
      {"freq": 4, "doc_freq": 3, "begin_count": 1, "middle_count": 2, "end_count": 1}
    """
    freq: int
    doc_freq: int
    begin_count: int
    middle_count: int
    end_count: int


# Protocols ------------------------------------------------------------------

@runtime_checkable
class HotspotDetector(Protocol):
    """
    Build an index from leaked passwords by harvesting n-grams in [min_n, max_n],
    then report the de-duplicated hotspots of a candidate password.
    """

    def add_leaked_password(self, password: str, min_n: int, max_n: int) -> None:
        """
        Index every substring of `password` whose length lies in [min_n, max_n].
        Raises InvalidArgumentError if password is None, min_n < 1 or max_n < min_n.
        """
        ...

    def hotspots_in(self, candidate: str) -> AbstractSet[Hotspot]:
        """
        Return each indexed substring found in `candidate` at most once, with
        candidate position info aggregated inside the Hotspot.
        Raises InvalidArgumentError if candidate is None.
        """
        ...
