"""
Ledger exceptions.

Handlers in app.main translate these into HTTP responses; services raise them
without knowing about HTTP.
"""


class LedgerError(Exception):
    """Base exception for the station ledger"""
    status_code = 500


class InvalidRecordOrder(LedgerError):
    """Daily records are not strictly increasing by date"""
    status_code = 500


class NegativeQuantity(LedgerError):
    """A quantity, price or opening balance is below zero"""
    status_code = 400


class RecordNotFound(LedgerError):
    """No record exists for a (date, material) pair"""
    status_code = 404


class UnknownMaterial(LedgerError):
    status_code = 404


class InvalidPeriod(LedgerError):
    """Week, month, year or month count outside the accepted range"""
    status_code = 400
