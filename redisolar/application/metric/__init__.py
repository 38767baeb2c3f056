"""Metric Use Cases."""
