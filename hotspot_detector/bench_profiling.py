# bench_profiling.py
"""
Simple profiling harness for DLBHotspotDetector.hotspots_in

Usage:
    python -m hotspot_detector.bench_profiling --runs 200 --warmup 20
    python -m hotspot_detector.bench_profiling --wordlist leaks.txt --min-n 3 --max-n 6
"""

import argparse
import statistics
import time
from typing import Dict, List, Sequence

from hotspot_detector.cli import read_wordlist
from hotspot_detector.core.detector import DLBHotspotDetector
from hotspot_detector.core.protocols import HotspotDetector

# lightweight synthetic corpus
SAMPLE_LEAKS = [
    "password123",
    "admin123",
    "letmein",
    "qwerty2020",
    "iloveyou!",
    "dragon1985",
    "sunshine99",
    "monkey12345",
]

SAMPLE_CANDIDATES = [
    "mypass123",
    "Qwerty!2020",
    "sunshine-dragon",
    "correct horse battery staple",
    "letmein2020",
]


def profile(
    detector: HotspotDetector, candidates: Sequence[str], runs: int = 200, warmup: int = 20
) -> List[float]:
    """Return per-call latencies of hotspots_in in milliseconds."""
    if not candidates:
        raise ValueError("need at least one candidate to profile")
    for i in range(warmup):
        detector.hotspots_in(candidates[i % len(candidates)])

    times = []
    for i in range(runs):
        c = candidates[i % len(candidates)]
        t0 = time.perf_counter()
        detector.hotspots_in(c)
        times.append((time.perf_counter() - t0) * 1000.0)
    return times


def summarize(times: Sequence[float]) -> Dict[str, float]:
    times_sorted = sorted(times)
    if not times_sorted:
        return {"count": 0, "mean_ms": 0.0, "median_ms": 0.0, "p99_ms": 0.0, "max_ms": 0.0}
    return {
        "count": len(times_sorted),
        "mean_ms": statistics.mean(times_sorted),
        "median_ms": statistics.median(times_sorted),
        "p99_ms": times_sorted[max(0, int(len(times_sorted) * 0.99) - 1)],
        "max_ms": times_sorted[-1],
    }


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--runs", type=int, default=200)
    parser.add_argument("--warmup", type=int, default=20)
    parser.add_argument("--wordlist", default=None)
    parser.add_argument("--min-n", type=int, default=3)
    parser.add_argument("--max-n", type=int, default=6)
    args = parser.parse_args()

    det = DLBHotspotDetector()
    leaks = read_wordlist(args.wordlist) if args.wordlist else SAMPLE_LEAKS
    det.add_leaked_passwords(leaks, args.min_n, args.max_n)

    s = summarize(profile(det, SAMPLE_CANDIDATES, runs=args.runs, warmup=args.warmup))
    print("n-grams indexed:", det.size())
    print("calls:", s["count"])
    print("mean ms: %.4f" % s["mean_ms"])
    print("median ms: %.4f" % s["median_ms"])
    print("p99 ms: %.4f" % s["p99_ms"])


if __name__ == "__main__":
    main()
