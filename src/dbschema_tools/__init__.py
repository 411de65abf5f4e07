"""Console commands for inspecting a database and exporting its schema to Excel."""

__version__ = "0.1.0"
