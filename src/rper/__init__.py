"""rper: recursive permissions."""
