"""
Core module for shared domain infrastructure.

This module contains:
- Domain events, exceptions and value objects
- Infrastructure abstractions (event bus, device storage, database)
- Metrics, health views and management commands
"""
