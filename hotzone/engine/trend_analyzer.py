"""
Trend Analyzer — trend direction, shift status and betting recommendation.

Stateless: every call classifies one snapshot (plus one derived trend flag).
There is no hysteresis between calls.

Status checks run in a fixed order:
  1. Hot      normalized >= 0.75 and density >= 4
  2. Warming  normalized >= 0.5  and density >= 4 and trend up
  3. Cold     normalized <  0.2
  4. Cooling  normalized <  0.3  or trend down
  5. Cold     everything else
The ranges overlap, so reordering the checks changes results at the
boundaries.
"""

from types import MappingProxyType

import sys
sys.path.insert(0, '.')
from config import (
    HOT_NORMALIZED_SCORE, HOT_MIN_DENSITY,
    WARMING_NORMALIZED_SCORE, WARMING_MIN_DENSITY,
    COOLING_MAX_SCORE, COLD_THRESHOLD,
    TREND_STRONG_CHANGE, TREND_MODERATE_CHANGE,
)

HOT = 'Hot'
WARMING = 'Warming'
COOLING = 'Cooling'
COLD = 'Cold'

UP = 'up'
DOWN = 'down'
STABLE = 'stable'


def _compare(current, previous):
    if current > previous:
        return UP
    if current < previous:
        return DOWN
    return STABLE


class TrendAnalyzer:
    """Classifies the betting climate from dominant-zone snapshots."""

    THRESHOLDS = MappingProxyType({
        'hot_normalized_score': HOT_NORMALIZED_SCORE,
        'hot_min_density': HOT_MIN_DENSITY,
        'warming_normalized_score': WARMING_NORMALIZED_SCORE,
        'warming_min_density': WARMING_MIN_DENSITY,
        'cooling_max_score': COOLING_MAX_SCORE,
        'cold_threshold': COLD_THRESHOLD,
    })

    def __init__(self, zone_mapper):
        self.zone_mapper = zone_mapper

    def trend_direction(self, current, previous):
        """Compare the current dominant zone against the previous window's.

        Same zone: compare raw scores. Different zones: the denser zone wins;
        equal densities fall back to raw scores, and a tie counts as down.

        Returns:
            'up', 'down' or 'stable'
        """
        if not previous:
            return STABLE

        if previous['zone'] == current['zone']:
            return _compare(current['score'], previous['score'])

        direction = _compare(self.zone_mapper.density_of(current['zone']),
                             self.zone_mapper.density_of(previous['zone']))
        if direction != STABLE:
            return direction
        return UP if current['score'] > previous['score'] else DOWN

    def trend_strength(self, current, previous):
        """'strong', 'moderate' or 'weak' based on relative score change."""
        if not previous:
            return 'weak'

        change = abs(current['score'] - previous['score'])
        relative = change / previous['score'] if previous['score'] > 0 else change

        if relative > TREND_STRONG_CHANGE:
            return 'strong'
        if relative > TREND_MODERATE_CHANGE:
            return 'moderate'
        return 'weak'

    def classify_shift_status(self, dominant, trend, statistics=None):
        """Ordered threshold checks, see module docstring."""
        normalized = dominant['normalized_score']
        density = dominant['density']

        if normalized >= HOT_NORMALIZED_SCORE and density >= HOT_MIN_DENSITY:
            return HOT

        if (normalized >= WARMING_NORMALIZED_SCORE
                and density >= WARMING_MIN_DENSITY
                and trend == UP):
            return WARMING

        # Cold is checked before Cooling
        if normalized < COLD_THRESHOLD:
            return COLD

        if normalized < COOLING_MAX_SCORE or trend == DOWN:
            return COOLING

        return COLD

    def recommendation(self, status, dominant, trend):
        """Fixed lookup from status to a betting recommendation.

        Returns:
            dict with 'recommendation', 'should_skip_bet', 'confidence', 'action'
        """
        zone = dominant['zone']

        if status == HOT:
            return {
                'recommendation': (f"Zone {zone} is HOT! Great betting opportunity with "
                                   f"{dominant['normalized_score']:.1f} hits per spin."),
                'should_skip_bet': False,
                'confidence': 'high',
                'action': 'bet',
            }
        if status == WARMING:
            return {
                'recommendation': f"Zone {zone} is warming up. Entry possible with caution.",
                'should_skip_bet': False,
                'confidence': 'medium',
                'action': 'consider',
            }
        if status == COOLING:
            return {
                'recommendation': f"Zone {zone} is cooling down. Consider skipping bets.",
                'should_skip_bet': True,
                'confidence': 'medium',
                'action': 'skip',
            }
        return {
            'recommendation': f"Zone {zone} is cold. Strongly recommend skipping bets.",
            'should_skip_bet': True,
            'confidence': 'high',
            'action': 'skip',
        }

    def analyze_shift(self, current, previous, statistics=None):
        """Trend, status and recommendation for one pair of snapshots."""
        trend = self.trend_direction(current, previous)
        status = self.classify_shift_status(current, trend, statistics)
        advice = self.recommendation(status, current, trend)

        return {
            'status': status,
            'trend_direction': trend,
            'trend_strength': self.trend_strength(current, previous),
            'recommendation': advice['recommendation'],
            'should_skip_bet': advice['should_skip_bet'],
            'confidence': advice['confidence'],
            'action': advice['action'],
            'dominant_zone': current['zone'],
            'score': current['score'],
            'normalized_score': current['normalized_score'],
            'density': current['density'],
        }

    def should_auto_enable_skip_bet(self, status, confidence):
        return status in (COLD, COOLING) and confidence == 'high'

    def should_auto_disable_skip_bet(self, status, confidence):
        return status in (HOT, WARMING) and confidence == 'high'
