"""Leaked-password n-gram hotspot detection."""

from hotspot_detector.core import (
    DetectorConfig,
    DLBHotspotDetector,
    Hotspot,
    HotspotDetector,
    InvalidArgumentError,
    NgramStats,
)

__all__ = [
    "DetectorConfig",
    "DLBHotspotDetector",
    "Hotspot",
    "HotspotDetector",
    "InvalidArgumentError",
    "NgramStats",
]

__version__ = "0.1.0"
