"""
Warehouse Explorer
==================
Structure, dimension, date-range, and KPI exploration of a Gold-layer star schema.
"""

__version__ = "0.1.0"
