"""History Use Cases."""
