"""Application-level configuration and logging setup."""
