"""Shared application-layer building blocks."""
