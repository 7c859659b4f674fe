"""Web adapter: FastAPI routes."""
