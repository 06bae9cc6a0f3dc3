"""Grid generation exceptions."""


class GridGenError(Exception):
    """Base class for every error raised by grid generation."""


class BindingError(GridGenError, ValueError):
    """Raised when the object handed to a grid cannot be bound."""


class MetadataError(GridGenError):
    """Raised when a marked member carries metadata no widget kind matches."""


class FieldAccessError(GridGenError):
    """Raised when reading or writing a marked field fails.

    The original exception is always available as ``__cause__``.
    """

    def __init__(self, member, owner, cause: BaseException):
        self.member = member
        self.owner = owner
        super().__init__(
            f"Cannot access field '{member.name}' of {type(owner).__name__}: {cause}"
        )
