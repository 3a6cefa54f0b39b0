"""Everything that exists during a round, and the per-frame update that drives it."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from goatsalon.animation import AnimationEvent, switch_player_animation_states
from goatsalon.goat import Customer, Goat, move_jaw, spawn_customer
from goatsalon.hud import (
    Score,
    UiPopup,
    is_game_over,
    score_text,
    timer_text,
    update_popups,
    update_timer,
)
from goatsalon.players import Player, PlayerId, spawn_players
from goatsalon.salon import Prop, Salon, spawn_platform


@dataclass
class World:
    """The salon, the goat, both players and the round's score and pop-ups."""

    salon: Salon
    goat: Goat
    players: dict[PlayerId, Player]
    score: Score = field(default_factory=Score)
    popups: list[UiPopup] = field(default_factory=list)
    control_panel_ui: list[Prop] = field(default_factory=list)
    panel_sessions: dict[PlayerId, Any] = field(default_factory=dict)
    elapsed: float = 0.0
    timer_label: str = ""

    @classmethod
    def new_game(cls) -> World:
        """Set up a fresh round: room, customer, players and a zero score."""
        goat = spawn_customer()
        return cls(
            salon=spawn_platform(),
            goat=goat,
            players={player.id: player for player in spawn_players()},
            timer_label=timer_text(goat.customer),
        )

    @property
    def customer(self) -> Customer:
        return self.goat.customer

    @property
    def game_over(self) -> bool:
        return is_game_over(self.customer)

    @property
    def score_label(self) -> str:
        return score_text(self.score)

    def player(self, player_id: PlayerId) -> Player:
        """The player with ``player_id``; raise KeyError if it is not in the round."""
        try:
            return self.players[player_id]
        except KeyError:
            raise KeyError(f"no player {player_id!r} in this round") from None

    def update(self, delta: float) -> bool:
        """Advance the round by ``delta`` seconds; return whether the goat has lost patience."""
        if delta < 0:
            raise ValueError(f"cannot update backwards: {delta}")
        self.elapsed += delta
        solids = self.salon.solids()
        events: list[AnimationEvent] = []
        for player in self.players.values():
            events.extend(player.update(delta, solids))
        switch_player_animation_states(events, self.players)
        self.timer_label = update_timer(self.customer, delta)
        move_jaw(self.goat.parts, self.elapsed)
        self.popups = update_popups(self.popups, delta)
        return self.game_over