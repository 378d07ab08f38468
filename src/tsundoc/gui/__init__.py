"""Presentation-side logic of the library view (layout, view models)."""
