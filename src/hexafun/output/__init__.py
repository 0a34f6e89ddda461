"""Output layer — CLI reports rendered as Rich text or JSON."""
