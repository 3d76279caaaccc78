"""HTTP API for clearing map generation."""
