"""Exceptions raised by the correlation game."""


class CorrGameError(Exception):
    """Base exception for corrgame."""


class DegenerateSampleError(CorrGameError):
    """Every generated sample had a zero-variance column, so no statistic is defined."""

    def __init__(self, attempts: int):
        self.attempts = attempts
        super().__init__(
            f"Could not generate a sample with non-zero variance after {attempts} attempts"
        )
