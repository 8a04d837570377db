"""Shared utilities for cookieconsent."""
