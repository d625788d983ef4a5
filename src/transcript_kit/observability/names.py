# src/transcript_kit/observability/names.py

"""Standard metric names for transcript-kit observability.

Use these constants instead of hardcoded strings for consistency
across the codebase.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# Parsing Metrics
# ============================================================================

# Duration
PARSE_DURATION = "parse_duration"

# Counters
PARSE_REQUESTS_TOTAL = "parse_requests_total"
PARSE_ERRORS_TOTAL = "parse_errors_total"

# Counters (segments accumulate over time)
PARSE_SEGMENTS_TOTAL = "parse_segments_total"

# Counters (capability gaps answered with a placeholder document)
PARSE_PLACEHOLDERS_TOTAL = "parse_placeholders_total"


# ============================================================================
# Batch Metrics
# ============================================================================

# Gauges
PARSE_BATCH_SIZE = "parse_batch_size"
