"""Server configuration constants."""

# Server Configuration
DEFAULT_API_HOST = "0.0.0.0"
DEFAULT_API_PORT = 8000  # Default port for FastAPI backend
