"""
recruitflow — recruitment workflow graph builder and validator.

Users assemble a hiring pipeline (Start → Task(s) → End) as a
directed graph; the validator decides whether the graph is
well-formed before it may be saved and activated.
"""

__version__ = "0.1.0"
