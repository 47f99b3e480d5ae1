"""Infrastructure layer: concrete adapters for domain protocols."""
