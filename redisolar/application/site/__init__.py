"""Site Use Cases."""
