"""Application layer: request models, option resolution and the write use case."""
