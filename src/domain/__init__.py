"""Domain layer: models, parsers and ranking rules."""
