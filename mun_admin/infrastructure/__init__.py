"""Infrastructure adapters: persistence, observability and monitoring."""
