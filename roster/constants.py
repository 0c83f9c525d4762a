"""
Application-level constants for hardcoded query behavior.

These values should NEVER be changed via environment variables. For
configurable values (database URL, default page size, log level), see
roster/settings.py.
"""

# ============================================================================
# Pagination Safety Limits
# ============================================================================

# Maximum allowed page size to prevent excessive database loads
# Hard safety limit regardless of what client requests
# For default page size, see roster/settings.py (DEFAULT_PAGE_SIZE)
MAX_PAGE_SIZE = 1000


# ============================================================================
# Sorting
# ============================================================================

# Sort keys accepted from callers, mapped to projection field names
SORTABLE_FIELDS = frozenset({"member_id", "username", "age", "team_name"})


# ============================================================================
# Logging
# ============================================================================

# Structured log lines longer than this are truncated
MAX_LOG_SIZE_BYTES = 16 * 1024
