"""
Exceptions raised by firecore helpers
"""


class FirecoreError(Exception):
    """Base exception for firecore errors"""
    pass


class ValidationError(FirecoreError, ValueError):
    """Bad argument shape, type or range"""
    pass


class InvalidDateError(ValidationError):
    """Argument is not a calendar date"""
    pass


class InvalidLeadTimeError(ValidationError):
    """Lead time is not a non-negative whole number"""
    pass


class InvalidUnitError(ValidationError):
    """Lead time unit outside day/month/year"""
    pass


class InvalidFlagError(ValidationError):
    """Boolean switch given a non-boolean value"""
    pass


class InvalidFormatError(FirecoreError, ValueError):
    """Relative date expression could not be parsed"""
    pass


class InvalidConversionError(FirecoreError, ValueError):
    """Disallowed input/output pairing in a conversion or format call"""
    pass


class DateTimeError(FirecoreError, ValueError):
    """Wall-clock reading that cannot be mapped to a single instant"""
    pass


class NonexistentTimeError(DateTimeError):
    """Wall-clock time skipped by a DST spring-forward transition"""
    pass


class AmbiguousTimeError(DateTimeError):
    """Wall-clock time repeated by a DST fall-back transition"""
    pass


class DatabaseUnavailableError(FirecoreError):
    """No database connection was supplied"""
    pass
