"""Classic introductory algorithms: number theory, sorting, searching and small record helpers."""

__version__ = "0.1.0"
__all__ = ["numbers", "sorting", "searching", "records", "cli"]