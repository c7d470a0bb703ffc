"""Pydantic request and response schemas for Aimee."""
