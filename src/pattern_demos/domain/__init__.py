"""Domain layer - the pattern object families, free of I/O configuration."""
