"""
Schematic catalog.

Components:
- schematic_store.py: reference images (URL or data URI) with first-run defaults
"""
