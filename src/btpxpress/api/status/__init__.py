"""Status endpoints: health, version and secured probe."""
