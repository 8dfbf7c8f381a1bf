"""Packaged HTML templates."""
