"""Logo outline engine: interpretation, nesting, segmentation, classification."""
