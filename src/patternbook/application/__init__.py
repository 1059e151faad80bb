"""Application layer - example registration and catalog use cases."""
