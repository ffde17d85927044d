"""Domain layer: models, ports and rules with no infrastructure imports."""
