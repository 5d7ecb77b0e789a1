"""Domain layer - pure monetary algebra.

This layer contains the monetary value objects, the currency error taxonomy,
and the logging protocol (port). It has NO dependencies on any framework or
infrastructure - it is pure Python.

Structure:
- value_objects/: Currency, Amount, Outcome (immutable)
- errors/: CurrencyError variants and CurrencyOperationError
- enums/: Ordering
- protocols/: LoggerProtocol
"""
