"""Error types and runtime values."""
