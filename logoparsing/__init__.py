"""Variable bindings for a Logo-like interpreter."""
