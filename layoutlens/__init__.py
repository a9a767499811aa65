"""LayoutLens: normalizes layout and field schema exports into a cross-referenced model."""

__version__ = "1.0.0"
