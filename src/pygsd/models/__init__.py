"""pyGSD data models."""
