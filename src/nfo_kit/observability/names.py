# src/nfo_kit/observability/names.py

"""Standard metric names for nfo-kit observability.

Use these constants instead of hardcoded strings for consistency
across the codebase.

Note: All duration metrics are in milliseconds by convention.
Units are handled by the metrics backend (e.g., converted to seconds in Prometheus).
"""

# ============================================================================
# NFO Parser Metrics
# ============================================================================

# Duration
NFO_PARSE_DURATION = "nfo_parse_duration"

# Counters
NFO_FILES_PARSED_TOTAL = "nfo_files_parsed_total"
NFO_OPEN_ERRORS_TOTAL = "nfo_open_errors_total"
NFO_FIELD_ERRORS_TOTAL = "nfo_field_errors_total"

# Gauges (lines seen by a single parse)
NFO_LINES_TOTAL = "nfo_lines_total"
