"""
Hot Zone Orchestrator — wires the mapper, calculator and trend analyzer.

analyze() never raises: bad input, too little data and internal failures
all come back as an inactive result dict.
"""

from collections import namedtuple
from datetime import datetime, timezone

import sys
sys.path.insert(0, '.')
from config import (
    MIN_SPINS_FOR_ANALYSIS, ANALYSIS_WINDOW, ENABLE_AUTO_SKIP_SUGGESTIONS,
)
from hotzone.engine.zone_mapper import ZoneMapper
from hotzone.engine.score_calculator import ZoneScoreCalculator
from hotzone.engine.trend_analyzer import TrendAnalyzer, HOT, WARMING, COOLING, COLD


HotZoneConfig = namedtuple(
    'HotZoneConfig',
    ['min_spins_for_analysis', 'analysis_window', 'enable_auto_skip_suggestions'],
    defaults=[MIN_SPINS_FOR_ANALYSIS, ANALYSIS_WINDOW, ENABLE_AUTO_SKIP_SUGGESTIONS],
)


def _token(value):
    # JSON numbers may arrive as floats (1.0)
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value)


class HotZoneOrchestrator:
    """Runs the full hot-zone analysis over a spin history."""

    def __init__(self, config=None, zone_mapper=None, score_calculator=None,
                 trend_analyzer=None):
        self.config = config if config is not None else HotZoneConfig()
        if self.config.analysis_window <= 0:
            raise ValueError(f"analysis_window must be positive, got {self.config.analysis_window}")

        self.zone_mapper = zone_mapper if zone_mapper is not None else ZoneMapper()
        self.score_calculator = (score_calculator if score_calculator is not None
                                 else ZoneScoreCalculator(self.zone_mapper))
        self.trend_analyzer = (trend_analyzer if trend_analyzer is not None
                               else TrendAnalyzer(self.zone_mapper))

    def filter_history(self, history):
        """Drop anything that isn't a known outcome. Order is preserved.

        Tokens are compared as strings, so 1, 1.0 and '1' are the same outcome.
        """
        if not isinstance(history, (list, tuple)):
            return []
        tokens = [_token(r) for r in history if r is not None]
        return [t for t in tokens if self.zone_mapper.is_valid_outcome(t)]

    def analyze(self, history):
        """Analyze a spin history (oldest first).

        Returns:
            dict: active result with status/trend/recommendation, or an
            inactive result with 'message' (and 'error' on failure)
        """
        if not isinstance(history, (list, tuple)):
            return {
                'active': False,
                'error': True,
                'message': 'Invalid spin history: must be a list',
                'current_spins': 0,
            }

        try:
            valid = self.filter_history(history)

            if len(valid) < self.config.min_spins_for_analysis:
                return {
                    'active': False,
                    'message': (f"Need at least {self.config.min_spins_for_analysis} "
                                f"valid spins for analysis"),
                    'current_spins': len(valid),
                    'required_spins': self.config.min_spins_for_analysis,
                }

            current_window, previous_window = self._split_windows(valid)

            current = self.score_calculator.analyze_window(
                current_window, self.config.analysis_window)
            previous = None
            if previous_window is not None:
                previous = self.score_calculator.analyze_window(
                    previous_window, self.config.analysis_window)

            shift = self.trend_analyzer.analyze_shift(
                current['dominant_zone'],
                previous['dominant_zone'] if previous else None,
                current['statistics'],
            )

            result = self._build_result(current, shift, len(valid))

            if self.config.enable_auto_skip_suggestions:
                result['auto_skip_suggestions'] = self._auto_skip_suggestions(shift)

            return result

        except Exception as e:
            print(f"[HotZone] Analysis failed: {e}")
            return {
                'active': False,
                'error': True,
                'message': f"Analysis failed: {e}",
                'current_spins': len(history),
            }

    def get_analysis_summary(self, history):
        """Condensed view of analyze() for display/debugging."""
        analysis = self.analyze(history)
        if not analysis['active']:
            return analysis

        return {
            'active': True,
            'status': analysis['status'],
            'dominant_zone': analysis['dominant_zone'],
            'trend_direction': analysis['trend_direction'],
            'confidence': analysis['confidence'],
            'total_spins': analysis['total_spins'],
            'analysis_window': self.config.analysis_window,
            'recommendation': analysis['recommendation'],
        }

    def get_zone_configuration(self):
        """Zone layout, densities, thresholds and window settings."""
        return {
            'zone_segment_map': {z: list(r) for z, r in self.zone_mapper.zone_segment_map.items()},
            'zone_density_map': dict(self.zone_mapper.zone_density_map),
            'min_spins_required': self.config.min_spins_for_analysis,
            'analysis_window': self.config.analysis_window,
            'auto_skip_suggestions': self.config.enable_auto_skip_suggestions,
            'thresholds': dict(self.trend_analyzer.THRESHOLDS),
        }

    # ─── Internals ───────────────────────────────────────────────────

    def _split_windows(self, valid):
        window = self.config.analysis_window
        current = valid[-window:]
        previous = valid[-2 * window:-window] if len(valid) > window else None
        return current, previous

    def _build_result(self, current, shift, total_spins):
        return {
            'active': True,
            'status': shift['status'],
            'dominant_zone': shift['dominant_zone'],
            'score': shift['score'],
            'normalized_score': shift['normalized_score'],
            'density': shift['density'],
            'trend_direction': shift['trend_direction'],
            'trend_strength': shift['trend_strength'],
            'confidence': shift['confidence'],
            'action': shift['action'],
            'recommendation': shift['recommendation'],
            'should_skip_bet': shift['should_skip_bet'],

            'hit_counts': current['hit_counts'],
            'zone_scores': current['zone_scores'],
            'zone_ranking': current['ranking'],
            'statistics': current['statistics'],

            'analysis_window': self.config.analysis_window,
            'total_spins': total_spins,
            'timestamp': datetime.now(timezone.utc).isoformat(),
        }

    def _auto_skip_suggestions(self, shift):
        status = shift['status']
        confidence = shift['confidence']
        return {
            'should_enable_skip_bet': self.trend_analyzer.should_auto_enable_skip_bet(status, confidence),
            'should_disable_skip_bet': self.trend_analyzer.should_auto_disable_skip_bet(status, confidence),
            'enable_message': (f"Recommend enabling Skip Bet: Zone is {status}"
                               if status in (COLD, COOLING) else None),
            'disable_message': (f"Recommend disabling Skip Bet: Zone is {status}"
                                if status in (HOT, WARMING) else None),
        }
