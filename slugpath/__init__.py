"""Slugpath - slug to output path resolution for static site builds.

Maps author-supplied content slugs to concrete ``index.html`` destinations
under a build root, ready for a separate renderer to write.
"""

__version__ = "0.1.0"

# Configure logging for library use
import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Re-export main CLI entry point
from .cli import main

__all__ = ["main"]
