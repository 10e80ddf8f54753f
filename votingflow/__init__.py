"""
votingflow - Permissioned single-election voting workflow

An administrator whitelists voters, voters submit proposals and cast one
vote each, and the administrator tallies a plurality winner. Every
operation is gated by a forward-only workflow phase.
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
