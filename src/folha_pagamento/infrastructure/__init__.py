"""Infrastructure adapters: parsers and repositories."""
