"""Demand, coverage and order computation for loading-list capture sessions."""

__version__ = "0.3.0"
