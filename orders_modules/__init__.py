"""
Orders Modules.

Thin orchestration layers over the Orders Kernel.

Modules:
- Reporting: open fiscal year lookup, multi-year pre-tax order totals
"""
