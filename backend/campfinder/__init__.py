"""Campfinder Application Package: bilingual campsite directory API.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
