"""Pydantic models for replicadash."""
