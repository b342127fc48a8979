"""Config – env-based settings and their validation errors."""
