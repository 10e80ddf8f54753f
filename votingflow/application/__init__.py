"""Application layer - ports and services orchestrating the election domain."""
