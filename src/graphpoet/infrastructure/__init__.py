"""Infrastructure layer — filesystem access for corpora."""
