"""Scoring weight constants for utility reliability.

Recency bands decide how much a report counts toward a utility's score;
status values map each reported status onto the 0-100 scale.
"""

# ---------------------------------------------------------------------------
# Recency bands (age in whole days)
# ---------------------------------------------------------------------------
FRESH_DAYS = 7    # age <= 7 days counts in full
STALE_DAYS = 30   # 8-30 days counts at half weight; older is excluded

FRESH_WEIGHT = 1.0
STALE_WEIGHT = 0.5
EXPIRED_WEIGHT = 0.0

# ---------------------------------------------------------------------------
# Status base values
# ---------------------------------------------------------------------------
STABLE_VALUE = 100
FLICKERING_VALUE = 50
OUTAGE_VALUE = 0

# Worst case for statuses the engine does not recognise
UNKNOWN_STATUS_VALUE = 0

# ---------------------------------------------------------------------------
# Score range
# ---------------------------------------------------------------------------
SCORE_MIN = 0
SCORE_MAX = 100
