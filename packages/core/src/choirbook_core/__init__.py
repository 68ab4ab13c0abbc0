"""Core domain & services for Choirbook.

Contains the calendar day classifier, time-slot grouping, audio bookmark
validation and persistence, and configuration.
"""

from .config import Settings  # noqa: F401
