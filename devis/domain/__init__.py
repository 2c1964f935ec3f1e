"""Domain layer: entity models and pure calculators."""
