# hotspot_detector/core/detector.py
"""
DLBHotspotDetector - n-gram hotspot index over leaked passwords.

Indexing (add_leaked_password):
  every substring of length min_n..max_n is inserted into a DLB trie and its
  terminal node counts total occurrences, distinct passwords (doc_freq) and
  where in the password it showed up (begin / middle / end).

Lookup (hotspots_in):
  the trie is walked from every offset of the candidate; every indexed
  n-gram found is classified against the candidate and folded into one
  record per distinct substring.

Example:
    det = DLBHotspotDetector()
    det.add_leaked_password("password123", 3, 6)
    for h in det.hotspots_in("mypass123"):
        print(h)

Not thread-safe: callers that share one detector across threads must lock
around each call.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import AbstractSet, Dict, Iterable, Optional, Set

from hotspot_detector.core.dlb_trie import DLBNode, DLBTrie
from hotspot_detector.core.hotspot import Hotspot
from hotspot_detector.core.protocols import NgramStats

logger = logging.getLogger(__name__)


class InvalidArgumentError(ValueError):
    """Raised when a public operation is called with an invalid argument."""


def _check_range(min_n: int, max_n: int) -> None:
    if min_n < 1 or max_n < min_n:
        raise InvalidArgumentError(f"invalid n-range [{min_n}, {max_n}]")


@dataclass(frozen=True)
class DetectorConfig:
    """Default n-gram range used when bulk indexing without explicit bounds."""
    min_n: int = 3
    max_n: int = 6

    def __post_init__(self) -> None:
        _check_range(self.min_n, self.max_n)


class _CandidateStats:
    """Per-lookup aggregate for one n-gram: corpus counters plus candidate positions."""

    __slots__ = (
        "freq",
        "doc_freq",
        "begin_count",
        "middle_count",
        "end_count",
        "candidate_at_begin",
        "candidate_middle_count",
        "candidate_at_end",
    )

    def __init__(self, node: DLBNode) -> None:
        # copied once, the trie is not read again for this n-gram
        self.freq = node.freq
        self.doc_freq = node.doc_freq
        self.begin_count = node.begin_count
        self.middle_count = node.middle_count
        self.end_count = node.end_count
        self.candidate_at_begin = False
        self.candidate_middle_count = 0
        self.candidate_at_end = False

    def observe(self, at_begin: bool, in_middle: bool, at_end: bool) -> None:
        if at_begin:
            self.candidate_at_begin = True
        if in_middle:
            self.candidate_middle_count += 1
        if at_end:
            self.candidate_at_end = True

    def to_hotspot(self, ngram: str) -> Hotspot:
        return Hotspot(
            ngram=ngram,
            freq=self.freq,
            doc_freq=self.doc_freq,
            begin_count=self.begin_count,
            middle_count=self.middle_count,
            end_count=self.end_count,
            candidate_at_begin=self.candidate_at_begin,
            candidate_middle_count=self.candidate_middle_count,
            candidate_at_end=self.candidate_at_end,
        )


class DLBHotspotDetector:
    """
    HotspotDetector backed by a DLB trie.

    Public API:
      add_leaked_password(password, min_n, max_n)
      add_leaked_passwords(passwords, min_n=None, max_n=None)
      hotspots_in(candidate) -> set of Hotspot (insertion ordered)
      stats(ngram) -> NgramStats | None
      password_count, size(), `ngram in detector`
    """

    def __init__(self, config: Optional[DetectorConfig] = None) -> None:
        self.cfg = config or DetectorConfig()
        self._trie = DLBTrie()
        self._passwords = 0

    # indexing ------------------------------------------------------------------
    def add_leaked_password(self, password: str, min_n: int, max_n: int) -> None:
        if password is None:
            raise InvalidArgumentError("null leaked password")
        _check_range(min_n, max_n)
        self._index(password, min_n, max_n)

    def add_leaked_passwords(
        self,
        passwords: Iterable[str],
        min_n: Optional[int] = None,
        max_n: Optional[int] = None,
    ) -> int:
        """
        Bulk insert. Bounds default to the detector config.
        Returns how many passwords were indexed.
        """
        lo = self.cfg.min_n if min_n is None else min_n
        hi = self.cfg.max_n if max_n is None else max_n
        _check_range(lo, hi)

        count = 0
        for pw in passwords:
            if pw is None:
                raise InvalidArgumentError(f"null leaked password at position {count}")
            self._index(pw, lo, hi)
            count += 1
        logger.debug("indexed %d passwords, %d distinct n-grams", count, self._trie.size())
        return count

    def _index(self, password: str, min_n: int, max_n: int) -> None:
        # seen-set is scoped to this password only, it drives doc_freq
        seen: Set[str] = set()
        length = len(password)

        for n in range(min_n, max_n + 1):
            for i in range(length - n + 1):
                ngram = password[i : i + n]
                at_begin = i == 0
                at_end = i + n == length
                in_middle = not at_begin and not at_end

                self._trie.insert_and_update(
                    ngram, at_begin, in_middle, at_end, ngram not in seen
                )
                seen.add(ngram)

        self._passwords += 1

    # lookup --------------------------------------------------------------------
    def hotspots_in(self, candidate: str) -> AbstractSet[Hotspot]:
        if candidate is None:
            raise InvalidArgumentError("null candidate password")

        # dict keeps first-encountered order
        found: Dict[str, _CandidateStats] = {}
        length = len(candidate)

        for i in range(length):
            for n, node in self._trie.matches_from(candidate, i):
                ngram = candidate[i : i + n]
                at_begin = i == 0
                at_end = i + n == length
                in_middle = not at_begin and not at_end

                agg = found.get(ngram)
                if agg is None:
                    agg = found[ngram] = _CandidateStats(node)
                agg.observe(at_begin, in_middle, at_end)

        logger.debug("candidate of length %d matched %d hotspots", length, len(found))
        # dict keys act as an ordered set of hotspots
        return dict.fromkeys(agg.to_hotspot(ngram) for ngram, agg in found.items()).keys()

    # inspection -----------------------------------------------------------------
    def stats(self, ngram: str) -> Optional[NgramStats]:
        """Corpus counters for an indexed n-gram, None if it was never indexed."""
        node = self._trie.get(ngram)
        if node is None:
            return None
        return NgramStats(
            freq=node.freq,
            doc_freq=node.doc_freq,
            begin_count=node.begin_count,
            middle_count=node.middle_count,
            end_count=node.end_count,
        )

    @property
    def password_count(self) -> int:
        return self._passwords

    def size(self) -> int:
        """Number of distinct n-grams indexed."""
        return self._trie.size()

    def __contains__(self, ngram: str) -> bool:
        return ngram in self._trie
