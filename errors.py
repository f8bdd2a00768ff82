class BeamInputError(ValueError):
    """Raised when a beam configuration breaks a physical invariant."""


class InvalidGeometry(BeamInputError):
    pass


class InvalidMagnitude(BeamInputError):
    pass


class DegenerateSpan(BeamInputError):
    pass


class UnknownUnits(BeamInputError):
    pass
