"""Configuration, logging and persistence helpers shared by the API."""
