"""Default configuration values for devcrew.

All configurable defaults are defined here. These can be overridden by:
1. User config file (~/.devcrew/config.yaml)
2. Project config file (.devcrew/config.yaml)
3. Environment variables
4. CLI flags

Priority (highest to lowest):
CLI flags > Environment > Project config > User config > Defaults
"""

from __future__ import annotations

# =============================================================================
# COORDINATION
# =============================================================================

# Upper bound in seconds for each external collaborator call
DEFAULT_SERVICE_TIMEOUT: float = 60.0

# Run the enrichment step (code examples, package info, ...) after a draft
DEFAULT_ENRICHMENT_ENABLED: bool = True

# =============================================================================
# REPORTS
# =============================================================================

# Tasks listed per category in a summary before "... and N more"
DEFAULT_SUMMARY_PREVIEW_LIMIT: int = 3

# Compliance standard used when none is given (owasp or gdpr)
DEFAULT_COMPLIANCE_STANDARD: str = "owasp"

# =============================================================================
# LOGGING
# =============================================================================

DEFAULT_LOG_LEVEL: str = "WARNING"

LOG_FORMAT: str = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
