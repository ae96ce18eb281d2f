"""Common exception classes."""

import re


class BaseError(Exception):
    """Generic exception class which other exceptions should inherit from."""

    def __init__(self, *args, error_code: str = None, **kwargs):
        """Initialize a BaseError instance."""
        super().__init__(*args, **kwargs)
        self.error_code = error_code if error_code else None

    @property
    def message(self) -> str:
        """Accessor for the error message."""
        return str(self.args[0]).strip() if self.args else ""

    @property
    def roll_up(self) -> str:
        """
        Accessor for nested error messages rolled into one line.

        Codec errors chained as causes are appended in order.
        """

        def flatten(exc: Exception):
            return ".".join(
                (
                    re.sub(
                        r"\n\s*",
                        ". ",
                        (
                            str(exc.args[0]).strip()
                            if exc.args
                            else exc.__class__.__name__
                        ),
                    ).strip()
                ).rsplit(".", 1)
            )

        line = flatten(self)
        err = self
        while err.__cause__:
            err = err.__cause__
            line += ". {}".format(flatten(err))
        return f"{line.strip()}."


class MultibaseError(BaseError):
    """Base error for multibase operations."""


class MissingArgumentError(MultibaseError):
    """A base identifier or a buffer was not supplied."""


class UnsupportedBaseError(MultibaseError):
    """The requested base name or prefix code is not registered."""


class InvalidEncodingError(MultibaseError):
    """The payload does not decode cleanly under the claimed base."""


class DuplicateBaseError(MultibaseError):
    """
    Registry construction error.

    Raised when two registered bases share a name or a prefix code, which
    would make decoding ambiguous.
    """
