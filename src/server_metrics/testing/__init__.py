"""Testing – in-memory doubles for the metrics port."""
