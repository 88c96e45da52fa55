"""Sortable Posts: persists drag and drop ordering of posts and taxonomy terms."""

__version__ = "0.1.0"
