"""HTTP API exposing an autocomplete index."""
