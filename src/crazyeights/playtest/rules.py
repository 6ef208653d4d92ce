"""Rule summary shown at the start of a session."""

from __future__ import annotations

from crazyeights.engine import HAND_SIZE


class RuleExplainer:
    """Explains the game rules."""

    def explain_rules(self) -> str:
        """Generate condensed rule summary."""
        lines: list[str] = []

        lines.append("=== Crazy Eights ===")
        lines.append("")
        lines.append("Goal: Empty your hand before the computer does")
        lines.append(f"Setup: Each player gets {HAND_SIZE} cards")
        lines.append("Turn: Play a card matching the suit or rank of the discard pile")
        lines.append("Wild: An 8 can always be played; you then name the next suit")
        lines.append("Draw: If you draw a card you can play, you keep your turn")

        return "\n".join(lines)
