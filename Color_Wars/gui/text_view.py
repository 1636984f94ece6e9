"""Plain-text board renderer for terminal play."""

import string


class TextView:
    EMPTY = " ."

    def __init__(self, roster, out=print):
        self.roster = list(roster)
        self.out = out
        # One letter per player, in turn order
        self.symbols = {p: string.ascii_uppercase[i % 26] for i, p in enumerate(self.roster)}

    def format_board(self, snapshot) -> str:
        header = "   " + " ".join(f"{x:>2}" for x in range(snapshot.width))
        lines = [header]
        for y, row in enumerate(snapshot.cells):
            cells = []
            for cell in row:
                if cell.is_empty:
                    cells.append(self.EMPTY)
                else:
                    cells.append(f"{self.symbols.get(cell.owner, '?')}{min(cell.level, 9)}")
            lines.append(f"{y:>2} " + " ".join(cells))
        return "\n".join(lines)

    def format_players(self, player_states, current=None) -> str:
        parts = []
        for state in player_states:
            marker = "*" if state["id"] == current else " "
            status = "" if state["active"] else " (out)"
            parts.append(f"{marker}{self.symbols[state['id']]}={state['id']}: {state['score']}{status}")
        return "  ".join(parts)

    def render(self, snapshot, player_states, current_player=None, outcome=None):
        if outcome is not None and outcome.events:
            for event in outcome.events:
                targets = ", ".join(str(t) for t in event.targets)
                self.out(f"  wave {event.wave}: {event.source} -> {targets}")
        self.out(self.format_board(snapshot))
        self.out(self.format_players(player_states, current_player))
