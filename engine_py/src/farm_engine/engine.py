"""Game session: the command surface that drives a single game"""

import copy
import logging
import random
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Optional

from . import deck, effects, skills, turns, victory
from .constants import CARD_PROTOTYPES, CHARACTERS, EVENT_GAME_STARTED, ROLE_SET
from .errors import (
    ActionNotAllowed, ConsistencyError, GameError, GameOver, InvalidPlayerCount,
)
from .models import (
    CardPrototype, CharacterDefinition, GameState, LogEvent, Player, Role,
)
from .rules import RuleConfig, default_rules
from .validate import validate_play, validate_skill

logger = logging.getLogger(__name__)


@dataclass
class CommandResult:
    """Snapshot and narration produced by one successful command."""
    state: GameState
    events: List[LogEvent] = field(default_factory=list)

    @property
    def messages(self) -> List[str]:
        return [event.message for event in self.events]


def assign_characters(
    roles: List[Role],
    roster: List[CharacterDefinition],
) -> List[CharacterDefinition]:
    """
    Pick a character for each seat whose role pool allows that seat's role.

    Seats with the fewest candidates choose first, so a flexible character is
    not used up before a role that can only be played by it. When all candidates
    are taken a candidate is reused.
    """
    candidates = {
        seat: [c for c in roster if role in c.role_pool]
        for seat, role in enumerate(roles)
    }
    for seat, options in candidates.items():
        if not options:
            raise ValueError(f"No character in the roster can play {roles[seat].value}")

    chosen: Dict[int, CharacterDefinition] = {}
    used = set()
    for seat in sorted(candidates, key=lambda s: (len(candidates[s]), s)):
        free = [c for c in candidates[seat] if c.name not in used]
        character = (free or candidates[seat])[0]
        chosen[seat] = character
        used.add(character.name)

    return [chosen[seat] for seat in range(len(roles))]


class GameSession:
    """
    Owns one game's state and applies commands to it one at a time.

    Every command works on a private copy of the state that only replaces the
    current state once the command has fully succeeded, so a rejected command
    leaves the game exactly as it was.
    """

    def __init__(
        self,
        rules: Optional[RuleConfig] = None,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        card_catalog: Optional[List[CardPrototype]] = None,
        roster: Optional[List[CharacterDefinition]] = None,
    ):
        self.rules = rules or default_rules
        self.rng = rng or random.Random(seed)
        self.card_catalog = card_catalog if card_catalog is not None else CARD_PROTOTYPES
        self.roster = roster if roster is not None else CHARACTERS
        self.expected_card_ids: List[int] = []
        self.corrupted = False
        self._state: Optional[GameState] = None

        for role in ROLE_SET:
            if not any(role in c.role_pool for c in self.roster):
                raise ValueError(f"Roster has no character for role {role.value}")

    @classmethod
    def from_state(
        cls,
        state: GameState,
        rules: Optional[RuleConfig] = None,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        expected_card_ids: Optional[Iterable[int]] = None,
    ) -> 'GameSession':
        """Resume a session from a previously taken snapshot."""
        session = cls(rules=rules, seed=seed, rng=rng)
        session._state = copy.deepcopy(state)
        if expected_card_ids is None:
            expected_card_ids = state.all_card_ids()
        session.expected_card_ids = sorted(expected_card_ids)
        return session

    @property
    def started(self) -> bool:
        return self._state is not None

    @property
    def state(self) -> Optional[GameState]:
        """A copy of the current state; mutating it does not affect the game."""
        return copy.deepcopy(self._state)

    @property
    def is_game_over(self) -> bool:
        return self._state is not None and self._state.is_game_over

    def check_integrity(self) -> bool:
        return self._state is not None and deck.validate_deck_integrity(
            self._state, self.expected_card_ids
        )

    # Commands

    def start_game(self, player_names: List[str]) -> CommandResult:
        """Deal roles, characters and starting hands, and open the first turn."""
        self._ensure_usable()
        if self._state is not None:
            raise ActionNotAllowed("The game has already started")
        if not self.rules.validate_player_count(len(player_names)):
            raise InvalidPlayerCount(
                f"Exactly {self.rules.player_count} players are required, got {len(player_names)}"
            )

        def setup(state: GameState):
            cards = deck.create_deck(self.card_catalog)
            self.expected_card_ids = sorted(c.id for c in cards)
            state.draw_pile = deck.shuffle_deck(cards, self.rng)

            roles = deck.shuffle_deck(list(ROLE_SET), self.rng)
            characters = assign_characters(roles, self.roster)
            for seat, name in enumerate(player_names):
                character = characters[seat]
                state.players.append(Player(
                    id=seat,
                    name=name,
                    role=roles[seat],
                    character=character,
                    health=character.base_health,
                    max_health=character.base_health,
                    hand=deck.draw(state, self.rules.starting_hand_size, self.rng),
                ))

            state.add_event(
                EVENT_GAME_STARTED,
                "Game started! Roles assigned.",
                players=[p.name for p in state.players],
            )
            turns.start_turn(state, 0)

        return self._execute("start_game", setup, GameState())

    def begin_turn(self) -> CommandResult:
        """Resolve the current player's pending Draw phase."""
        return self._execute(
            "begin_turn",
            lambda state: turns.resolve_draw_phase(state, self.rules, self.rng),
        )

    def play_card(self, card_id: int, target_id: Optional[int] = None) -> CommandResult:
        """Play a card from the current player's hand."""
        def apply(state: GameState):
            turns.resolve_draw_phase(state, self.rules, self.rng)
            player_id = state.current_player.id
            validate_play(state, player_id, card_id, target_id).raise_for_error()
            effects.play_card(state, player_id, card_id, target_id, self.rules)
            victory.check_victory(state)

        return self._execute("play_card", apply)

    def use_skill(
        self,
        target_id: Optional[int] = None,
        card_id: Optional[int] = None,
        option: Optional[str] = None,
    ) -> CommandResult:
        """Use the current player's active character skill."""
        def apply(state: GameState):
            turns.resolve_draw_phase(state, self.rules, self.rng)
            player_id = state.current_player.id
            validate_skill(state, player_id, self.rules, target_id, card_id, option).raise_for_error()
            skills.use_skill(state, player_id, target_id, card_id, option, self.rules, self.rng)
            victory.check_victory(state)

        return self._execute("use_skill", apply)

    def end_turn(self) -> CommandResult:
        """Run the Discard phase and pass the turn on."""
        return self._execute(
            "end_turn",
            lambda state: turns.end_turn(state, self.rules, self.rng),
        )

    # Internals

    def _ensure_usable(self):
        if self.corrupted:
            raise ConsistencyError("Session is corrupted and cannot accept commands")

    def _execute(
        self,
        name: str,
        apply: Callable[[GameState], object],
        working: Optional[GameState] = None,
    ) -> CommandResult:
        self._ensure_usable()
        if working is None:
            if self._state is None:
                raise ActionNotAllowed("The game has not started")
            if self._state.is_game_over:
                raise GameOver("The game is over")
            working = copy.deepcopy(self._state)

        first_event = len(working.game_log)
        rng_state = self.rng.getstate()
        try:
            apply(working)
            if not deck.validate_deck_integrity(working, self.expected_card_ids):
                raise ConsistencyError("Card conservation violated")
        except ConsistencyError as e:
            self.corrupted = True
            logger.error("%s left the game inconsistent: %s", name, e.message)
            raise
        except GameError as e:
            self.rng.setstate(rng_state)
            logger.info("Rejected %s: %s", name, e)
            raise
        except Exception:
            self.rng.setstate(rng_state)
            logger.exception("%s failed; state left unchanged", name)
            raise

        working.increment_version()
        self._state = working
        snapshot = copy.deepcopy(working)
        events = snapshot.game_log[first_event:]
        for event in events:
            logger.info("[%d] %s", event.seq, event.message)
        return CommandResult(state=snapshot, events=events)
