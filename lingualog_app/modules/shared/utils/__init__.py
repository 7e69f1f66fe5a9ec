"""Helpers shared by the domain modules."""
