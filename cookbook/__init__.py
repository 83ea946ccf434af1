"""Work queues, containers, text and sequence utilities, and small system tools."""

__version__ = "0.1.0"