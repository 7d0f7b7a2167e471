"""
Record shapes shared by the stores.

Components:
- models.py: Task, Schematic, Severity, partial inputs and defaulting factories
- seeds.py: demo tasks and default schematics installed on first run
"""
