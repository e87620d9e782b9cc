"""Pydantic models and enums."""
