"""Hypothesis strategies for ilibpack property-based testing."""
