"""CORS preflight endpoint."""
