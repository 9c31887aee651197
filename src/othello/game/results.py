from __future__ import annotations
from typing import List, Sequence

from othello.core.scoring import Outcome
from othello.players import Player


def score_lines(counts: Sequence[int], players: Sequence[Player]) -> List[str]:
    return [f"Player {p.name} score = {n}" for p, n in zip(players, counts)]


def outcome_message(outcome: Outcome, players: Sequence[Player]) -> str:
    if outcome.tie or outcome.winner is None:
        return "Tie game!"
    return f"Player {players[outcome.winner].name} wins!"
