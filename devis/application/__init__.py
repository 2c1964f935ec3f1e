"""Application layer: project state, persistence and recap services."""
