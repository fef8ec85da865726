"""Exception hierarchy for the splice drawing generator."""

from __future__ import annotations


class SpliceError(Exception):
    """Base class for every error the generator reports to its callers."""


class ConfigurationError(SpliceError):
    """The input file is unreadable or does not match the joint schema."""


class GeometryContractViolation(SpliceError):
    """The joint dimensions are inconsistent and cannot be drawn."""

    def __init__(self, problems: list[str]) -> None:
        self.problems = problems
        super().__init__("; ".join(problems))


class SinkError(SpliceError):
    """The drawing sink rejected a primitive or could not persist the drawing."""
