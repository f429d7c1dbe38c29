"""Infrastructure: persistence and security implementations."""
