"""Configuration state models."""
