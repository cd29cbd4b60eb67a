"""Movement-rule switches for the legality engine."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class MoveRules:
    """Pawn-rule configuration.

    The defaults reproduce the legacy behaviour, which differs from
    standard chess in two places:

    * the two-square advance ignores the square it jumps over;
    * an empty diagonal-forward square is an ordinary (non-capturing) move.

    Enable the flags to get the standard rules instead.
    """

    pawn_double_step_needs_clear_path: bool = False
    pawn_diagonal_needs_capture: bool = False

    @classmethod
    def legacy(cls) -> MoveRules:
        return cls()

    @classmethod
    def standard(cls) -> MoveRules:
        return cls(
            pawn_double_step_needs_clear_path=True,
            pawn_diagonal_needs_capture=True,
        )
