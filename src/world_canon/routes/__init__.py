"""HTTP routes for the world API."""
