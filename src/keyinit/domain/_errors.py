"""
Precondition errors raised by parameter initializers.

Fan-dependent initialization schemes (Kaiming, Xavier) cannot produce a
meaningful distribution without knowing how many connections feed into or
out of the layer being initialized. Omitting that information is a mistake
in layer construction code, not a data-dependent runtime condition, so these
exceptions are raised immediately instead of silently defaulting the fan.

Hierarchy
---------
- ``PreconditionError``: base class for caller contract violations.
- ``MissingFanError``: a required ``fan_in`` / ``fan_out`` was not supplied.
- ``InvalidFanError``: a supplied fan is not a positive integer.
"""


class PreconditionError(RuntimeError):
    """
    Raised when an initializer is invoked in violation of its call contract.
    """


class MissingFanError(PreconditionError):
    """
    Raised when a fan-dependent initializer is called without the fan it needs.

    Attributes
    ----------
    initializer : str
        Human-readable name of the initialization scheme (e.g. "Kaiming").
    fan : str
        Name of the missing parameter, either "fan_in" or "fan_out".
    """

    def __init__(self, initializer: str, fan: str) -> None:
        """
        Initialize the MissingFanError.

        Parameters
        ----------
        initializer : str
            Name of the initialization scheme that required the fan.
        fan : str
            Name of the fan parameter that was absent.
        """
        super().__init__(
            f"Can't use {initializer} initialization without specifying {fan}. "
            f"Use init_with method and provide {fan}."
        )
        self.initializer = initializer
        self.fan = fan


class InvalidFanError(PreconditionError, ValueError):
    """
    Raised when a fan value is supplied but is not a positive integer.

    Attributes
    ----------
    fan : str
        Name of the offending parameter.
    value : object
        The rejected value.
    """

    def __init__(self, fan: str, value: object) -> None:
        super().__init__(f"{fan} must be a positive integer, got {value!r}.")
        self.fan = fan
        self.value = value
