"""Application layer: authorization guards and the dispatch pipeline."""
