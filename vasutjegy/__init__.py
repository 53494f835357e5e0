"""Console railway ticket booking: trains, cars, seats, tickets and their text-file storage."""

__version__ = "1.0.0"
__all__ = ["models", "storage", "menu"]