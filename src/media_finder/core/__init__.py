"""Core interfaces, models and services."""
