"""MCPolice - international AI compliance monitoring service."""

__version__ = "1.0.0"
