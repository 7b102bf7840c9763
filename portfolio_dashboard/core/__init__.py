"""Configuration, metrics and the refresh controller."""
