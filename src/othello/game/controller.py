from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from othello.config import QUIT_TOKEN
from othello.core.board import Board
from othello.core.flips import apply_move, captures
from othello.core.notation import format_move
from othello.core.rules import has_any_legal_move, is_legal
from othello.core.scoring import Outcome, evaluate_outcome
from othello.game.actions import Action, Place, Quit, Skip, parse_action
from othello.game.results import outcome_message, score_lines
from othello.game.state import GameState, Phase
from othello.players import Player
from othello.types import Seat
from othello.ui.render import render

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class StepResult:
    accepted: bool
    phase: Phase
    retry: bool = False
    flipped: int = 0


class TurnController:
    """
    Owns the board and whose turn it is for one game.

    PLAYING -> GAME_OVER when the player to move has no legal placement or
    quits. Skips and legal placements pass the turn; an illegal placement
    leaves everything as it was and asks for a retry.
    """

    def __init__(self, board: Board, players: Sequence[Player], first: int = 0) -> None:
        if len(players) < 2:
            raise ValueError("A game needs at least two players.")
        if not 0 <= first < len(players):
            raise ValueError(f"First seat must be between 0 and {len(players) - 1}.")
        self.state = GameState(board=board, players=list(players), current=Seat(first))

    @property
    def board(self) -> Board:
        return self.state.board

    @property
    def phase(self) -> Phase:
        return self.state.phase

    @property
    def current(self) -> Seat:
        return self.state.current

    @property
    def outcome(self) -> Optional[Outcome]:
        return self.state.outcome

    def _advance(self) -> None:
        self.state.current = Seat((self.state.current + 1) % len(self.state.players))

    def _finish(self, reason: str) -> Outcome:
        outcome = evaluate_outcome(self.state.board, self.state.players)
        self.state.phase = Phase.GAME_OVER
        self.state.outcome = outcome
        logger.info("Game over (%s): scores=%s", reason, outcome.scores)
        return outcome

    def refresh(self) -> Phase:
        """End the game if the player to move is stuck."""
        if self.state.phase is Phase.PLAYING and not has_any_legal_move(self.state.board, self.state.current):
            self.state.last_status = f"{self.state.current_player.name} has no legal move."
            self._finish("no legal move")
        return self.state.phase

    def step(self, action: Action) -> StepResult:
        if self.refresh() is Phase.GAME_OVER:
            return StepResult(accepted=False, phase=Phase.GAME_OVER)

        player = self.state.current_player

        if isinstance(action, Quit):
            self.state.last_status = f"{player.name} quit."
            self._finish("quit")
            return StepResult(accepted=True, phase=self.state.phase)

        if isinstance(action, Skip):
            logger.debug("Seat %d (%s) skipped", self.state.current, player.name)
            self._advance()
            self.state.last_status = f"{player.name} skipped. Next player's turn!"
            self.refresh()
            return StepResult(accepted=True, phase=self.state.phase)

        if isinstance(action, Place):
            board = self.state.board
            if not is_legal(board, self.state.current, action.row, action.col):
                logger.debug("Rejected move %s for seat %d", (action.row, action.col), self.state.current)
                self.state.last_status = "Last move was invalid!"
                return StepResult(accepted=False, phase=self.state.phase, retry=True)

            flipped = len(captures(board, self.state.current, action.row, action.col))
            apply_move(board, self.state.current, action.row, action.col)
            logger.debug(
                "Seat %d played %s, flipped %d",
                self.state.current,
                format_move(action.row, action.col),
                flipped,
            )
            self._advance()
            self.state.last_status = "Next player's turn!"
            self.refresh()
            return StepResult(accepted=True, phase=self.state.phase, flipped=flipped)

        raise TypeError(f"Unknown action: {action!r}")


def run_game(
    players: Sequence[Player],
    board: Board,
    first: int = 0,
    read: Callable[[str], str] = input,
    show_hints: bool = False,
) -> Outcome:
    ctl = TurnController(board, players, first)
    ctl.refresh()

    while ctl.phase is Phase.PLAYING:
        render(ctl.state, show_hints=show_hints)

        player = ctl.state.current_player
        try:
            raw = read(f"Player {player.name} ({player.symbol}) enter your move: ")
        except (EOFError, KeyboardInterrupt):
            raw = QUIT_TOKEN

        result = ctl.step(parse_action(raw))
        if result.retry:
            print("Your choice didn't work!")
            try:
                read("Press <Enter> to try again.")
            except (EOFError, KeyboardInterrupt):
                ctl.step(Quit())

    render(ctl.state)
    outcome = ctl.outcome
    if outcome is None:
        raise RuntimeError("Game loop ended without an outcome.")
    for line in score_lines(outcome.scores, ctl.state.players):
        print(line)
    print(outcome_message(outcome, ctl.state.players))
    print("Congratulations!")
    return outcome
