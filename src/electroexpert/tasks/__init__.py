"""
Task subsystem.

Components:
- task_store.py: in-memory maintenance log mirrored to the key-value storage
"""
