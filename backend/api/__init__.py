"""HTTP surface over the shapes store."""
