"""
Enemy definitions - one enemy type per level.

Each type carries a weighted action table. Every action kind appears at
most once per table, since committed intents are resolved by kind.
"""

from ..engine_core.state import EnemyAction, EnemyActionKind, EnemyType


CULTIST_ART = r"""     /\   /\
    (  o.o  )
     > ^ <
    /|   |\
   / |   | \
  /  |___|  \
 |   /---\   |
 |  | ಠ_ಠ |  |
  \ |_____|  /
   \|     | /
    |_____|"""

SPIDER_ART = r"""    /\   /\   /\
   (  o ) ( o  )
    \  \_/  /
     ) --- (
    /  ___  \
   |  /___\  |
    \ \___/ /
     \     /
      |___|"""

ELITE_GUARD_ART = (
    "     [===]\n"
    "     |[o]|\n"
    "   ___|||___\n"
    "  |  |||  |\n"
    "  |  |||  |\n"
    "  |  /|\\  |\n"
    "  | / | \\ |\n"
    "  |/  |  \\|\n"
    "     /|\\\n"
    "    / | \\"
)

CULTIST = EnemyType(
    type_id="cultist",
    name="Cultist",
    max_health=48,
    actions=(
        EnemyAction(
            kind=EnemyActionKind.ATTACK,
            description="⚔️ ATTACK - Will deal 12 damage",
            weight=50,
            damage=12,
        ),
        EnemyAction(
            kind=EnemyActionKind.DEFEND,
            description="🛡️ DEFEND - Will gain 8 armor",
            weight=25,
            armor=8,
        ),
        EnemyAction(
            kind=EnemyActionKind.CHARGE,
            description="⚡ CHARGE - Building up power...",
            weight=25,
        ),
    ),
    ascii_art=CULTIST_ART,
)

SPIDER = EnemyType(
    type_id="spider",
    name="Giant Spider",
    max_health=62,
    actions=(
        EnemyAction(
            kind=EnemyActionKind.ATTACK,
            description="⚔️ BITE - Will deal 14 damage",
            weight=55,
            damage=14,
        ),
        EnemyAction(
            kind=EnemyActionKind.DEFEND,
            description="🛡️ WEB WALL - Will gain 6 armor",
            weight=25,
            armor=6,
        ),
        EnemyAction(
            kind=EnemyActionKind.SPECIAL,
            description="🕸️ SPECIAL - Spinning a web...",
            weight=20,
        ),
    ),
    ascii_art=SPIDER_ART,
)

ELITE_GUARD = EnemyType(
    type_id="elite_guard",
    name="Elite Guard",
    max_health=84,
    actions=(
        EnemyAction(
            kind=EnemyActionKind.ATTACK,
            description="⚔️ HEAVY ATTACK - Will deal 18 damage",
            weight=45,
            damage=18,
        ),
        EnemyAction(
            kind=EnemyActionKind.DEFEND,
            description="🛡️ SHIELD WALL - Will gain 12 armor",
            weight=35,
            armor=12,
        ),
        EnemyAction(
            kind=EnemyActionKind.CHARGE,
            description="⚡ CHARGE - Raising its halberd...",
            weight=20,
        ),
    ),
    ascii_art=ELITE_GUARD_ART,
)


LEVEL_ENEMIES: list[EnemyType] = [CULTIST, SPIDER, ELITE_GUARD]
