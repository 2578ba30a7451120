"""
Database module for patientgraph
"""

from .connection import Database, create_database

__all__ = ["Database", "create_database"]
