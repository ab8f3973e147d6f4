"""Core types, errors, schemas and validation for storage packing."""
