"""Utility helpers for cacheworker."""
