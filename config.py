"""
Configuration constants for the Hot-Zone Detection Engine.
Single source of truth for wheel layout, zone partition and thresholds.
"""

import os

# ─── Outcome Alphabet ────────────────────────────────────────────────
# Only "1" carries heat information; every other outcome still counts
# towards window length but never scores.
TARGET_OUTCOME = '1'
TOTAL_SEGMENTS = 54                 # Physical positions 0-53

# Segment positions on the physical wheel, per outcome.
# The landed segment is not observable, only the outcome.
WHEEL_SEGMENT_MAP = {
    '1': [0, 5, 9, 12, 16, 18, 21, 23, 25, 27, 30, 32, 34, 36, 39, 41,
          43, 45, 48, 50, 52, 1, 7, 14],
    '2': [2, 6, 10, 15, 19, 24, 28, 33, 37, 42, 46, 51, 3],
    '5': [4, 11, 17, 22, 29, 35, 40],
    '10': [8, 20, 31, 47],
    'chance': [13, 26],             # No betting value
    '2rolls': [38, 53],
    '4rolls': [44, 49],
}

VALID_OUTCOMES = tuple(WHEEL_SEGMENT_MAP.keys())

# ─── Zone Partition ──────────────────────────────────────────────────
# Six contiguous zones of 9 segments each (inclusive bounds).
ZONE_SEGMENT_MAP = {
    'A': (0, 8),
    'B': (9, 17),
    'C': (18, 26),
    'D': (27, 35),
    'E': (36, 44),
    'F': (45, 53),
}

ZONES = tuple(ZONE_SEGMENT_MAP.keys())

# Number of "1" segments counted per zone
ZONE_DENSITY_MAP = {
    'A': 4,
    'B': 3,
    'C': 4,
    'D': 3,
    'E': 4,
    'F': 4,
}

# ─── Analysis Settings ───────────────────────────────────────────────
MIN_SPINS_FOR_ANALYSIS = 20         # Valid spins required before going active
ANALYSIS_WINDOW = 20                # Size of both current and previous windows
ENABLE_AUTO_SKIP_SUGGESTIONS = True

# ─── Shift Status Thresholds ─────────────────────────────────────────
# Calibrated for counting "1" results only. Checked in order:
# Hot → Warming → Cold → Cooling → Cold.
HOT_NORMALIZED_SCORE = 0.75         # Score per spin for Hot
HOT_MIN_DENSITY = 4
WARMING_NORMALIZED_SCORE = 0.5      # Score per spin for Warming (needs trend up)
WARMING_MIN_DENSITY = 4
COOLING_MAX_SCORE = 0.3             # Below this is Cooling
COLD_THRESHOLD = 0.2                # Below this is Cold

# ─── Trend Strength ──────────────────────────────────────────────────
TREND_STRONG_CHANGE = 0.5           # Relative score change for 'strong'
TREND_MODERATE_CHANGE = 0.2         # Relative score change for 'moderate'

# ─── Server Settings ─────────────────────────────────────────────────
HOST = '0.0.0.0'
PORT = int(os.environ.get('HOTZONE_PORT', 5050))
DEBUG = False
SECRET_KEY = os.environ.get('HOTZONE_SECRET_KEY', 'hotzone-detection-engine')

# Sample session used by the test-analysis endpoint (oldest first)
SAMPLE_SESSION = [2, 2, 2, 2, 1, 2, 2, 2, 2, 1, 2, 1, 1, 10, 1, 1,
                  10, 2, 1, 2, 1, 2, 2, 2, 10, 5, 1, 2, 5, 2, 1, 2]
