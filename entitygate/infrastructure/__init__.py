"""Infrastructure layer: persistence, logging and security adapters."""
