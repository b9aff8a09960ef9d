"""Classic algorithms and data structures as plain Python functions, with an algolab-sort command."""

__version__ = "0.1.0"