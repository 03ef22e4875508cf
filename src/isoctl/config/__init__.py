"""Configuration layer: settings sources, config discovery, and logging."""
