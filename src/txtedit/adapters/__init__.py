"""Collaborators that touch the outside world: files and the terminal."""
