"""Domain errors shared by the clinical modules.

Routers never raise these directly; `app.main` registers handlers that turn them
into HTTP responses.
"""


class InvalidArgumentError(ValueError):
    """Input has the wrong type or an out-of-range value."""


class ReferenceDataError(RuntimeError):
    """The CDT reference table source is missing or malformed."""
