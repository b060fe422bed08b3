"""Per-site core citation functions."""
