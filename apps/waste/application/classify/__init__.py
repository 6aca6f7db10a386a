"""Classify Use Cases."""
