"""
Custom exception classes for the fuel station.

Transactions never raise: over-fill and low reserve are clamped and reported.
These exceptions only guard construction of vehicles and pumps from bad data.
"""


class InvalidVehicleError(Exception):
    """Raised when a vehicle is created with a missing plate or an impossible fuel level."""

    def __init__(self, message: str = "Error: invalid vehicle") -> None:
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:  # pragma: no cover
        return self.message


class InvalidPumpError(Exception):
    """Raised when a pump is created with a non-positive price or a negative reserve."""

    def __init__(self, message: str = "Error: invalid pump") -> None:
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:  # pragma: no cover
        return self.message


class UnknownVehicleTypeError(Exception):
    """Raised when a vehicle record names a kind the station does not serve."""

    def __init__(self, message: str = "Error: unknown vehicle type") -> None:
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:  # pragma: no cover
        return self.message
