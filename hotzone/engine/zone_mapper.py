"""
Zone Mapper — static wheel knowledge.

Maps outcomes to candidate segments, segments to one of six contiguous
zones, and exposes the per-zone density of "1" segments. Nothing here is
recomputed after construction.
"""

from types import MappingProxyType

import sys
sys.path.insert(0, '.')
from config import (
    WHEEL_SEGMENT_MAP, ZONE_SEGMENT_MAP, ZONE_DENSITY_MAP, TOTAL_SEGMENTS,
)
from hotzone.engine.sampling import RandomSegmentSampler


class ZoneMapper:
    """Segment/zone lookups for the 54-segment wheel."""

    def __init__(self, sampler=None, density_map=None):
        self.sampler = sampler if sampler is not None else RandomSegmentSampler()

        self._segment_map = MappingProxyType(
            {outcome: tuple(segs) for outcome, segs in WHEEL_SEGMENT_MAP.items()})
        self._zone_ranges = MappingProxyType(dict(ZONE_SEGMENT_MAP))
        self._densities = MappingProxyType(
            dict(density_map if density_map is not None else ZONE_DENSITY_MAP))

        # Pre-compute segment → zone for fast lookup
        self._segment_zone = {}
        for zone, (start, end) in self._zone_ranges.items():
            for seg in range(start, end + 1):
                self._segment_zone[seg] = zone

    @property
    def zone_segment_map(self):
        return self._zone_ranges

    @property
    def zone_density_map(self):
        return self._densities

    def zones(self):
        """Zone letters in canonical order (A → F)."""
        return list(self._zone_ranges.keys())

    def segments_for(self, outcome):
        """Candidate segments for an outcome, or None if it is not on the wheel."""
        segments = self._segment_map.get(outcome)
        return list(segments) if segments is not None else None

    def sample_segment(self, outcome):
        """One segment for this outcome, picked by the sampler.

        Non-deterministic with the default sampler: the true landed segment
        cannot be recovered from the outcome alone.

        Returns:
            int segment index (0-53), or None if the outcome is unknown
        """
        segments = self.segments_for(outcome)
        if not segments:
            return None
        return self.sampler.pick(segments)

    def zone_for(self, segment):
        """Zone letter containing this segment, or None outside 0-53."""
        if segment is None or segment < 0 or segment >= TOTAL_SEGMENTS:
            return None
        return self._segment_zone.get(segment)

    def density_of(self, zone):
        return self._densities.get(zone, 0)

    def is_valid_outcome(self, outcome):
        return outcome in self._segment_map
