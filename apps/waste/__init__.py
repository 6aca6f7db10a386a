"""Waste Classification Service."""
