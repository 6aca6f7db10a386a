"""Category Use Cases."""
