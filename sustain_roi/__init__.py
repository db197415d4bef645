"""Sustainability rating ROI model."""

__version__ = "0.1.0"
