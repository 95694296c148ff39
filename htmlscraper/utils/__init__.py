"""Utility components for htmlscraper."""

from htmlscraper.utils.logging import setup_logging

__all__ = ['setup_logging']
