"""Claim Count — optional-criteria claim counting across GIS and non-GIS claim sources.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
