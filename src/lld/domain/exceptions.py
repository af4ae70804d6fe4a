"""Domain-level exceptions.

All contract violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class NullDelegateError(DomainException):
    """A topping was built without a pizza to wrap."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class UnknownShapeError(EntityNotFoundError):
    """The shape factory does not recognize the requested key."""


class UnknownMenuItemError(EntityNotFoundError):
    """No base pizza or topping is registered under the requested name."""
