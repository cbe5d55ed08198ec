"""
hotspot_detector.core

The indexing and lookup engine.
Contains:
 - the DLB (child/sibling) trie holding n-gram statistics (DLBTrie)
 - the detector that indexes leaked passwords and matches candidates (DLBHotspotDetector)
 - the Hotspot record returned by lookups
 - the HotspotDetector protocol
"""

from .dlb_trie import DLBNode, DLBTrie
from .hotspot import Hotspot
from .protocols import HotspotDetector, NgramStats
from .detector import DetectorConfig, DLBHotspotDetector, InvalidArgumentError

__all__ = [
    "DLBNode",
    "DLBTrie",
    "Hotspot",
    "HotspotDetector",
    "NgramStats",
    "DetectorConfig",
    "DLBHotspotDetector",
    "InvalidArgumentError",
]
