"""Cross-entity consistency checks between a template and its resources."""
