"""Domain layer: record schema entities and the mapping services."""
