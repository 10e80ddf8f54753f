"""Caller identity handling for the votingflow API."""
