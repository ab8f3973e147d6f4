"""Packing algorithms: item ordering, shelf placement and volume estimates."""
