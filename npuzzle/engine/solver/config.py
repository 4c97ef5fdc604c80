"""Limits applied to a single solver run."""

from __future__ import annotations

from dataclasses import dataclass

from npuzzle.errors import InvalidArgumentError


@dataclass(frozen=True)
class SolverConfig:
    """Optional deadline and expansion budget for a search.

    ``None`` means unlimited. ``max_expansions`` counts nodes expanded on
    both the original and the twin side together.
    """

    timeout: float | None = None
    max_expansions: int | None = None

    def __post_init__(self) -> None:
        if self.timeout is not None and self.timeout <= 0:
            raise InvalidArgumentError(
                f"timeout must be positive, got {self.timeout}."
            )
        if self.max_expansions is not None and self.max_expansions <= 0:
            raise InvalidArgumentError(
                f"max_expansions must be positive, got {self.max_expansions}."
            )
