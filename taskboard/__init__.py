"""Interactive console task manager with users, deadlines, priorities and statuses, kept in memory."""

__version__ = "0.1.0"