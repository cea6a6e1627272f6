"""GUI resources (styles)."""
