"""Data layer: outbound collaborators consumed by the risk engine."""
