"""FastAPI adapter for the unit scale lookups."""
