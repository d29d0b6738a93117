"""Billable hours extraction from time-tracking report PDFs."""

__version__ = "0.1.0"
