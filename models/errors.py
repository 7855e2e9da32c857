"""Exception types shared by the simulation models."""


class ValidationError(ValueError):
    """Raised when a source, intervention, configuration or lattice is invalid.

    Subclasses ``ValueError`` so callers that already guard numeric input
    with ``except ValueError`` keep working.
    """
