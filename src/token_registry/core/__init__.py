"""Core domain types, models, and exceptions."""
