"""Domain-level exceptions.

The pricing functions themselves never raise. Value objects, aggregates
and application handlers express rule violations as subclasses of
DomainException so the CLI layer can catch them uniformly.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""
