"""Core inventory and table models."""
