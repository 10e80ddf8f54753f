"""Pydantic API models for votingflow."""
