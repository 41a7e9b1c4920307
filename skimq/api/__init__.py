"""HTTP surface for the readable-summary pipeline."""
