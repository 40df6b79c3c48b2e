"""Persistence adapters: JSON file storage and the cached file repository."""
