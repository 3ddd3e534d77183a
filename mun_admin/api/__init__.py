"""HTTP API for MUN Admin."""
