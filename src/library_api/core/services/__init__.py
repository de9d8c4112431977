"""Core services: validation, patching, links, projections and the book
resource controller."""
