"""Domain rules: resource kind descriptors, identifier and mobile-number helpers."""
