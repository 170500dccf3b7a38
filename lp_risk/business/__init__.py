"""Business layer: configuration, threshold checks and the assessment pipeline."""
