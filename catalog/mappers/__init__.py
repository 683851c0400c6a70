"""Conversions between domain entities and API schemas."""
