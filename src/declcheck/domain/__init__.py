"""Domain layer: flag algebra, value objects, ports, errors."""
