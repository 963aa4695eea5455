"""Format instants as UTC calendar dates (YYYY-MM-DD)."""
