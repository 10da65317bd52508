"""Vector algebra and the perspective projection pipeline."""
