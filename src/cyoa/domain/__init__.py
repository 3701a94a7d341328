"""Domain models for parsed stories."""
