"""
Typed Exception Hierarchy for the Orders Kernel.

===============================================================================
WHY TYPED EXCEPTIONS
===============================================================================

Reporting callers must react to errors precisely. Matching on message text
is fragile, so:
  1. Every error has a TYPED exception class (catch by type, not message)
  2. Every exception has a CODE attribute (machine-readable, API-safe)
  3. Exceptions carry structured DATA (not just a message string)

Example:
    try:
        year = service.current_open_fiscal_year()
    except NoOpenFiscalYearError:
        year = prompt_user_for_year()
    except MultipleOpenFiscalYearsError as e:
        alert_admin(code=e.code, years=e.open_years)

===============================================================================
EXCEPTION HIERARCHY
===============================================================================

    OrdersKernelError (base)
    |
    +-- FiscalYearError
    |   +-- NoOpenFiscalYearError
    |   +-- MultipleOpenFiscalYearsError
    |
    +-- DataSourceError
        +-- InvalidFixtureError

===============================================================================
ERROR CODES - QUICK REFERENCE
===============================================================================

Category        | Code                        | When Raised
----------------|-----------------------------|-----------------------------------------
Fiscal year     | NO_OPEN_FISCAL_YEAR         | No fiscal year has OPEN status
                | MULTIPLE_OPEN_FISCAL_YEARS  | More than one fiscal year is OPEN
----------------|-----------------------------|-----------------------------------------
Data source     | INVALID_FIXTURE             | Fixture file is structurally invalid

Both fiscal-year errors are terminal for the call: the engine neither
retries nor guesses. Type errors at the call boundary (e.g. a non-integer
reference year) are raised as TypeError/ValueError and are not part of
this hierarchy.
"""


class OrdersKernelError(Exception):
    """
    Base exception for all orders kernel errors.

    All subclasses must have a `code` class attribute for machine-readable
    error identification.
    """

    code: str = "ORDERS_KERNEL_ERROR"


# Fiscal-year exceptions


class FiscalYearError(OrdersKernelError):
    """Base exception for fiscal-year lookup errors."""

    code: str = "FISCAL_YEAR_ERROR"


class NoOpenFiscalYearError(FiscalYearError):
    """No fiscal year carries the OPEN status."""

    code: str = "NO_OPEN_FISCAL_YEAR"

    def __init__(self, known_years: tuple[int, ...] = ()):
        self.known_years = known_years
        super().__init__(
            f"No open fiscal year among {len(known_years)} known fiscal years"
        )


class MultipleOpenFiscalYearsError(FiscalYearError):
    """
    More than one fiscal year carries the OPEN status.

    The source is expected to guarantee uniqueness; the engine surfaces the
    violation instead of picking one.
    """

    code: str = "MULTIPLE_OPEN_FISCAL_YEARS"

    def __init__(self, open_years: tuple[int, ...]):
        self.open_years = open_years
        years = ", ".join(str(y) for y in open_years)
        super().__init__(f"Multiple open fiscal years: {years}")


# Data-source exceptions


class DataSourceError(OrdersKernelError):
    """Base exception for collaborator data problems."""

    code: str = "DATA_SOURCE_ERROR"


class InvalidFixtureError(DataSourceError):
    """A fixture file does not have the expected structure."""

    code: str = "INVALID_FIXTURE"

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid fixture {path}: {reason}")
