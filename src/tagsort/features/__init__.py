"""Feature packages: metadata, path rendering, placement, scanning."""
