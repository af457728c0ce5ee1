"""
Core module for shared domain infrastructure.

This module contains:
- Domain events and exceptions
- Value objects shared across modules
- The in-process event bus
- Prometheus metrics
"""
