"""Manifest content shipped with the package."""
