"""FIFO and round-robin scheduling of simulated SQLite CRUD tasks with deadline checks."""

__version__ = "0.1.0"