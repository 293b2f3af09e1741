"""bwgraph: live network interface bandwidth graph for the terminal."""

__version__ = "0.4.0"
