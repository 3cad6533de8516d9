"""Game constants, card catalog and character roster"""

from typing import List

from .models import (
    CardKind, CardPrototype, CharacterDefinition, Role, SkillDefinition,
    SkillEffect, SkillKind,
)

HAND_LIMIT = 4
STARTING_HAND_SIZE = 4
BASE_DRAW = 2
PLAYER_COUNT = 4

# Roles dealt in a 4-player game
ROLE_SET = [Role.TYRANT, Role.LOYALIST, Role.REBEL, Role.COLLABORATOR]

# Card names used by the catalog below
CARD_THE_GUN = "The Gun"
CARD_DODGE = "Dodge"
CARD_APPLE_RATION = "Apple Ration"
CARD_THE_DOGS = "The Dogs"
CARD_SEVEN_COMMANDMENTS = "Seven Commandments"
CARD_OLD_MAJORS_DREAM = "Old Major's Dream"

CARD_PROTOTYPES: List[CardPrototype] = [
    CardPrototype(CARD_THE_GUN, CardKind.ATTACK, 20, "Deal 1 damage."),
    CardPrototype(CARD_DODGE, CardKind.DEFENSE, 15, "Cancel an incoming Attack."),
    CardPrototype(CARD_APPLE_RATION, CardKind.HEALTH, 10, "Restore 1 Health Point."),
    CardPrototype(CARD_THE_DOGS, CardKind.DISRUPTION, 5, "Target player discards 2 cards."),
    CardPrototype(CARD_SEVEN_COMMANDMENTS, CardKind.CONTROL, 5,
                  "Target player skips their next draw phase."),
    CardPrototype(CARD_OLD_MAJORS_DREAM, CardKind.SPECIAL, 3,
                  "Global Attack: All must Dodge or take 1 damage."),
]

CHARACTERS: List[CharacterDefinition] = [
    CharacterDefinition(
        name="Napoleon",
        base_health=4,
        role_pool=frozenset({Role.TYRANT}),
        skill=SkillDefinition("Propaganda", SkillKind.ACTIVE, SkillEffect.PROPAGANDA,
                              "Draw 2, then force an opponent to discard 1."),
    ),
    CharacterDefinition(
        name="Snowball",
        base_health=3,
        role_pool=frozenset({Role.REBEL, Role.LOYALIST}),
        skill=SkillDefinition("Windmill Plans", SkillKind.PASSIVE, SkillEffect.BONUS_DRAW,
                              "Draw +1 card at start of turn."),
    ),
    CharacterDefinition(
        name="Boxer",
        base_health=5,
        role_pool=frozenset({Role.LOYALIST}),
        skill=SkillDefinition("Work Harder", SkillKind.ACTIVE, SkillEffect.WORK_HARDER,
                              "Once per turn: Heal 1 HP OR draw 3 cards (but skip attack phase)."),
    ),
    CharacterDefinition(
        name="Squealer",
        base_health=3,
        role_pool=frozenset({Role.COLLABORATOR, Role.LOYALIST}),
        skill=SkillDefinition("Revising History", SkillKind.ACTIVE, SkillEffect.REVISING_HISTORY,
                              "Can swap a card with any player who has < 2 HP."),
    ),
]

# Log event kinds
EVENT_GAME_STARTED = "game_started"
EVENT_TURN_STARTED = "turn_started"
EVENT_DRAW = "draw"
EVENT_DRAW_SKIPPED = "draw_skipped"
EVENT_RESHUFFLE = "reshuffle"
EVENT_CARD_PLAYED = "card_played"
EVENT_DODGE = "dodge"
EVENT_DAMAGE = "damage"
EVENT_HEAL = "heal"
EVENT_FORCED_DISCARD = "forced_discard"
EVENT_SKIP_DRAW_SET = "skip_draw_set"
EVENT_SKILL_USED = "skill_used"
EVENT_CARD_SWAPPED = "card_swapped"
EVENT_HAND_TRIMMED = "hand_trimmed"
EVENT_ELIMINATED = "eliminated"
EVENT_SHOWDOWN = "showdown"
EVENT_VICTORY = "victory"
