"""
Hot-Zone Detection Engine — turns spin history into a betting-climate signal.
"""

from hotzone.engine.sampling import SegmentSampler, RandomSegmentSampler, FirstSegmentSampler
from hotzone.engine.zone_mapper import ZoneMapper
from hotzone.engine.score_calculator import ZoneScoreCalculator
from hotzone.engine.trend_analyzer import TrendAnalyzer
from hotzone.engine.orchestrator import HotZoneConfig, HotZoneOrchestrator

__all__ = [
    'SegmentSampler', 'RandomSegmentSampler', 'FirstSegmentSampler',
    'ZoneMapper', 'ZoneScoreCalculator', 'TrendAnalyzer',
    'HotZoneConfig', 'HotZoneOrchestrator',
]
