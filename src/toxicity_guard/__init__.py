"""Toxicity classification console application."""

__version__ = '0.1.0'
