"""Boundary layer: hosted model providers and the archive database."""
