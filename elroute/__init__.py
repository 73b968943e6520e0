"""
ElRoute trip feasibility engine.
Duration, charging and ferry reachability estimates for EV trips in Norway.
"""

__version__ = "1.0.0"
