"""Snake game environment with a NumPy deep Q-learning agent."""

__version__ = "0.1.0"