"""
Log-derived status aggregation for an execution/consensus client pair.

Parses the recent journal output of both node processes, combines it with
host measurements and serves the result as a single JSON snapshot.
"""

__version__ = "1.0.0"
