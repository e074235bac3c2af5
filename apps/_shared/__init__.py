"""Code shared across the producer APIs and consumer workers."""
