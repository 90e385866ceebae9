"""Domain layer: pure calendar echo classification."""
