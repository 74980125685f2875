"""Hormuud SMS courier: inbound webhook translation and outbound delivery."""

__version__ = "0.1.0"
