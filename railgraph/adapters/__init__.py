"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the application to external systems like:
- Distance storage (JSON, CSV, SQL databases, memory)
- Station catalogs (JSON)
- Route history storage (memory)
"""
