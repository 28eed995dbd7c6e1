"""Reserved value tokens and condition-key prefixes."""

# Sentinel values, recognised only on exact string equality
NOW = "NOW"
MIN = "MIN"
MAX = "MAX"

# Single leading character on condition/parameter keys
PREFIX_NEGATIVE = "!"
PREFIX_NO_CONVERT = "#"

__all__ = ["NOW", "MIN", "MAX", "PREFIX_NEGATIVE", "PREFIX_NO_CONVERT"]
