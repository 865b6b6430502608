"""Wikinav - navigation metadata for filesystem-backed wikis."""
