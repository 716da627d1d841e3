"""Infrastructure layer: external art collection APIs."""
