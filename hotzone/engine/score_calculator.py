"""
Zone Score Calculator — turns a window of outcomes into per-zone heat.

Formula: zone_score = hits_in_zone * ones_in_zone (density)

Only "1" results are counted. Other outcomes still occupy a slot in the
window, so a run of 2s dilutes the normalized score.

Note: multiplying recent hits by the zone's static density compounds the
recency signal with a fixed prior, so structurally dense zones are
amplified. This is intended.
"""

import numpy as np

import sys
sys.path.insert(0, '.')
from config import TARGET_OUTCOME, ANALYSIS_WINDOW


def _normalize(value, window_size):
    return value / window_size if window_size > 0 else 0


class ZoneScoreCalculator:
    """Scores zones for a single analysis window."""

    def __init__(self, zone_mapper):
        self.zone_mapper = zone_mapper

    def hit_counts(self, window):
        """Count "1" hits per zone.

        Each "1" is attributed to a zone by sampling one of its candidate
        segments, so counts can differ between calls on the same window.

        Returns:
            dict {zone: count} with all six zones present, in canonical order
        """
        counts = {zone: 0 for zone in self.zone_mapper.zones()}

        for outcome in window:
            if str(outcome) != TARGET_OUTCOME:
                continue
            segment = self.zone_mapper.sample_segment(TARGET_OUTCOME)
            zone = self.zone_mapper.zone_for(segment)
            if zone in counts:
                counts[zone] += 1

        return counts

    def scores(self, hit_counts):
        """score[z] = hit_counts[z] * density(z) for every zone."""
        return {
            zone: hit_counts.get(zone, 0) * self.zone_mapper.density_of(zone)
            for zone in self.zone_mapper.zones()
        }

    def normalized_scores(self, scores, window_size=ANALYSIS_WINDOW):
        """Score per spin for each zone."""
        return {zone: _normalize(score, window_size) for zone, score in scores.items()}

    def dominant_zone(self, scores, window_size=ANALYSIS_WINDOW):
        """Highest scoring zone. Ties go to the earliest zone (A first).

        Returns:
            dict with 'zone', 'score', 'normalized_score', 'density'
        """
        zones = self.zone_mapper.zones()
        best_zone = zones[0]
        best_score = scores.get(best_zone, 0)

        for zone in zones:
            score = scores.get(zone, 0)
            if score > best_score:
                best_zone = zone
                best_score = score

        return {
            'zone': best_zone,
            'score': best_score,
            'normalized_score': _normalize(best_score, window_size),
            'density': self.zone_mapper.density_of(best_zone),
        }

    def ranking(self, scores, window_size=ANALYSIS_WINDOW):
        """All zones sorted by score, highest first.

        sorted() is stable, so equal scores keep A → F order and the first
        entry always agrees with dominant_zone().
        """
        entries = [
            {
                'zone': zone,
                'score': scores.get(zone, 0),
                'normalized_score': _normalize(scores.get(zone, 0), window_size),
                'density': self.zone_mapper.density_of(zone),
            }
            for zone in self.zone_mapper.zones()
        ]
        return sorted(entries, key=lambda e: e['score'], reverse=True)

    def statistics(self, scores, window_size=ANALYSIS_WINDOW):
        """Summary statistics across the six zone scores."""
        values = np.array([scores.get(z, 0) for z in self.zone_mapper.zones()], dtype=float)
        total = float(values.sum())
        average = float(values.mean())
        minimum = float(values.min())
        maximum = float(values.max())

        return {
            'total': total,
            'average': average,
            'min': minimum,
            'max': maximum,
            'normalized_total': _normalize(total, window_size),
            'normalized_average': _normalize(average, window_size),
        }

    def analyze_window(self, window, window_size=ANALYSIS_WINDOW):
        """Run the full per-window pipeline."""
        hit_counts = self.hit_counts(window)
        zone_scores = self.scores(hit_counts)
        return {
            'hit_counts': hit_counts,
            'zone_scores': zone_scores,
            'dominant_zone': self.dominant_zone(zone_scores, window_size),
            'ranking': self.ranking(zone_scores, window_size),
            'statistics': self.statistics(zone_scores, window_size),
        }
