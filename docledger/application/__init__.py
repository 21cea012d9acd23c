"""Application layer: use cases orchestrating domain rules and persistence."""
