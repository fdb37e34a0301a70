"""Static reference data."""
from .fixes import FIXES, FIXES_BY_ID, EXPECTED_TOTAL, EXPECTED_DIFFICULTY_COUNTS, validate_catalog

__all__ = ["FIXES", "FIXES_BY_ID", "EXPECTED_TOTAL", "EXPECTED_DIFFICULTY_COUNTS", "validate_catalog"]
