"""
Exceptions raised by arthroprod.

Two channels are kept apart:

- ``ArError`` (a ``ValueError``) and its subclasses are raised for bad caller
  input such as an unknown axis or a form outside the registry. They are
  recoverable.
- ``AlgebraInvariantError`` signals a defect in the algebra itself (an
  incomplete canonical-order table, a magnitude forced negative, a
  non-invertible Van der Mark divisor). It is never caught inside the package.
"""


class ArError(ValueError):
    """Base class for recoverable errors in AR calculations."""


class InvalidIndexError(ArError):
    """An axis was not one of 0, 1, 2 or 3."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"The index provided was not one of 0, 1, 2 or 3: {value!r}")


class InvalidFormError(ArError):
    """A form had an invalid number of axes or repeated an axis."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Invalid component indices: {value!r}")


class FormNotAllowedError(ArError):
    """A form is well formed but is not a member of the registry in use."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Attempt to use invalid component: {value!r}")


class InvalidConfigError(ArError):
    """A registry override or config value failed validation."""

    def __init__(self, message: str):
        super().__init__(f"Attempt to create invalid config variable: {message}")


class AlgebraInvariantError(RuntimeError):
    """Internal invariant of the algebra was violated."""
