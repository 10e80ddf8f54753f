"""Composition root: builds the election service and logging from config.

Only this package and the API entry point know which adapters back the
application ports.
"""
