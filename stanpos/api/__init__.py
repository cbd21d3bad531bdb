"""Public helpers for running taggers and looking up tags."""
