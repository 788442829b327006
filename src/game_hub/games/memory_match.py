"""
Memory match (pairs) game engine.

A deck holds every symbol exactly twice. Players reveal two cards per
attempt; a matching pair stays face up, a mismatch is shown briefly
(engine locked) and then turned back over by a scheduled conceal event.

Every conceal event carries the epoch of the game that scheduled it.
new_game() / reset() bump the epoch, so an event left over from an
earlier game is ignored when it finally fires.
"""

from __future__ import annotations

import logging
from functools import partial
from typing import Dict, List, Optional, Sequence, Set

import numpy as np

from game_hub.core.rng import make_rng
from game_hub.core.scheduler import Job, Scheduler
from game_hub.core.types import Card
from game_hub.games.game_base import GameBase
from game_hub.games.game_state import MemorySnapshot

logger = logging.getLogger(__name__)

# 8 symbols, 16 cards
DEFAULT_SYMBOLS = ("🐍", "☂️", "🍕", "🌴", "🚗", "🥑", "🎩", "🐺")

DEFAULT_MISMATCH_DELAY = 0.85  # seconds

HIDDEN = "?"


class MemoryMatch(GameBase):
    """Pair-matching game over a shuffled deck of 2K cards."""

    def __init__(
        self,
        symbols: Sequence[str] = DEFAULT_SYMBOLS,
        *,
        scheduler: Optional[Scheduler] = None,
        mismatch_delay: float = DEFAULT_MISMATCH_DELAY,
        seed: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
    ):
        if mismatch_delay < 0:
            raise ValueError(f"mismatch_delay must be non-negative, got {mismatch_delay}")

        self.scheduler = scheduler if scheduler is not None else Scheduler()
        self.mismatch_delay = mismatch_delay
        self.rng = make_rng(seed, rng)

        self.symbols: tuple = ()
        self.deck: List[Card] = []
        self._by_id: Dict[int, Card] = {}
        self.revealed: List[int] = []
        self.matched: Set[str] = set()
        self.move_count = 0
        self.locked = False
        self.epoch = 0
        self._pending: Optional[Job] = None

        self.new_game(symbols)

    def game_id(self) -> str:
        return "memory"

    def get_cell_strings(self) -> dict:
        """Card id -> what the player currently sees on that card."""
        return {
            card.id: card.symbol if self._face_up(card) else HIDDEN
            for card in self.deck
        }

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def new_game(self, symbols: Optional[Sequence[str]] = None) -> None:
        """
        Deal a fresh shuffled deck.

        Args:
            symbols: The alphabet to deal; defaults to the current one.
                     Must be non-empty and free of duplicates.
        """
        alphabet = tuple(self.symbols if symbols is None else symbols)
        if not alphabet:
            raise ValueError("symbol alphabet must not be empty")
        if len(set(alphabet)) != len(alphabet):
            raise ValueError(f"symbol alphabet has duplicates: {alphabet}")

        self._invalidate_pending()

        ordered = [Card(i, s) for i, s in enumerate(alphabet + alphabet)]
        self.symbols = alphabet
        self.deck = [ordered[i] for i in self.rng.permutation(len(ordered))]
        self._by_id = {card.id: card for card in self.deck}
        self.revealed = []
        self.matched = set()
        self.move_count = 0
        self.locked = False

        logger.debug("New memory game (epoch %d, %d cards)", self.epoch, len(self.deck))

    def reset(self) -> None:
        self.new_game()

    def _invalidate_pending(self) -> None:
        self.epoch += 1
        self.scheduler.cancel(self._pending)
        self._pending = None

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def select_card(self, card_id) -> bool:
        """
        Turn a card face up.

        Returns False (and changes nothing) while locked, for unknown
        ids, for cards of an already matched symbol, and for the card
        that is already face up in this attempt.
        """
        if self.locked:
            return False

        card = self._by_id.get(card_id) if isinstance(card_id, (int, np.integer)) else None
        if card is None or card.symbol in self.matched or card.id in self.revealed:
            logger.debug("Selection of card %r rejected", card_id)
            return False

        self.revealed.append(card.id)
        if len(self.revealed) < 2:
            return True

        self.move_count += 1
        first = self._by_id[self.revealed[0]]

        if first.symbol == card.symbol:
            self.matched.add(card.symbol)
            self.revealed.clear()
            logger.debug("Matched %s (%d/%d)", card.symbol, len(self.matched), len(self.symbols))
            if self.is_complete():
                logger.info("Memory game complete in %d moves", self.move_count)
        else:
            self.locked = True
            self._pending = self.scheduler.call_later(
                self.mismatch_delay, partial(self.conceal, self.epoch)
            )
        return True

    def conceal(self, epoch: int) -> None:
        """Conceal event handler: turn a mismatched pair back over."""
        if epoch != self.epoch or not self.locked:
            logger.debug("Ignoring stale conceal event (epoch %d, current %d)", epoch, self.epoch)
            return
        self.revealed.clear()
        self.locked = False
        self._pending = None

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def _face_up(self, card: Card) -> bool:
        return card.id in self.revealed or card.symbol in self.matched

    def is_complete(self) -> bool:
        return len(self.matched) == len(self.symbols)

    def is_over(self) -> bool:
        return self.is_complete()

    def snapshot(self) -> MemorySnapshot:
        return MemorySnapshot(
            deck=tuple(self.deck),
            revealed=tuple(self.revealed),
            matched=frozenset(self.matched),
            move_count=self.move_count,
            locked=self.locked,
            epoch=self.epoch,
            complete=self.is_complete(),
        )

    def state_string(self, columns: int = 4) -> str:
        shown = self.get_cell_strings()
        cells = [f"{card.id:>2}:{shown[card.id]}" for card in self.deck]
        rows = [
            "  ".join(cells[i:i + columns]) for i in range(0, len(cells), columns)
        ]
        rows.append(
            f"Moves: {self.move_count}  Matched: {len(self.matched)}/{len(self.symbols)}"
        )
        return "\n".join(rows)
