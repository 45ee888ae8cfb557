"""Domain layer: tagged values, enums, exceptions. No store or I/O concerns."""
