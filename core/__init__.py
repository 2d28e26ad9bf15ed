"""Core bot components."""
