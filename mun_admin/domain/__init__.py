"""Domain layer: records, errors and the award ranking rules."""
