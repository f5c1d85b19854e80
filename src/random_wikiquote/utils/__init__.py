# ABOUTME: Cross-cutting utilities and shared infrastructure
# ABOUTME: Supporting services: logging, retry policy, terminal output

"""
Utils Layer: Shared infrastructure and cross-cutting concerns

This layer provides:
- Logging configuration and structured loggers
- The bounded retry policy for the quote pipeline
- Rich tables for CLI output

Data Flow: Supporting services for all other layers
"""

from . import logging

__all__ = [
    "logging",
]
