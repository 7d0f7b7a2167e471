"""ElectroExpert maintenance agenda: task log, schematic catalog, calendar and report export."""

__version__ = "0.1.0"
