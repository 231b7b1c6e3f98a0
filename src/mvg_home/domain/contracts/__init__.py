"""Contracts (protocols) for collaborators of the application layer."""
