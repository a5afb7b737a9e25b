"""
Orders Kernel

Read-side kernel for purchase-order reporting by fiscal year:
- Immutable fiscal-year, order and order-line values
- Read ports with in-memory and database-backed implementations
- Typed, coded exceptions
- Structured JSON logging
"""

__version__ = "0.1.0"
