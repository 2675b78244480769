"""Camel Up game simulator: rules engine, turn loop and bot harness."""

__version__ = "0.1.0"
