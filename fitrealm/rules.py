# fitrealm/rules.py
"""
Progression and reward rules.

Everything here is pure: no database access, no clock, no global random
state. Callers pass in what the rules need.
"""
import random
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional

from .errors import InvalidRequest

XP_PER_LEVEL = 1000

ENEMY_POWER_MIN = 20
ENEMY_POWER_MAX = 70  # exclusive

VICTORY_XP = 50
VICTORY_COINS = 25
DEFEAT_XP = 10
DEFEAT_COINS = 5

DAILY_REWARD_XP = 100
DAILY_REWARD_COINS = 50

COINS_PER_STAT_POINT = 50

LEADERBOARD_LIMIT = 100
LEADERBOARD_WINDOWS = {
    "all": None,
    "weekly": timedelta(days=7),
    "monthly": timedelta(days=30),
}


# ------------------------------
# Progression
# ------------------------------
def xp_for_activity(calories: int = 0, steps: int = 0, exercise_minutes: int = 0) -> int:
    """
    XP earned for one fitness submission:
      - 1 xp per 10 calories
      - 1 xp per 100 steps
      - 2 xp per exercise minute
    """
    return (calories or 0) // 10 + (steps or 0) // 100 + (exercise_minutes or 0) * 2


def level_for_xp(total_xp: int) -> int:
    """Level 1 at 0 xp, +1 level every 1000 xp."""
    return max(0, int(total_xp or 0)) // XP_PER_LEVEL + 1


def xp_to_next_level(total_xp: int) -> int:
    return level_for_xp(total_xp) * XP_PER_LEVEL - max(0, int(total_xp or 0))


# ------------------------------
# Battles
# ------------------------------
@dataclass(frozen=True)
class BattleOutcome:
    player_power: int
    enemy_power: int
    victory: bool
    xp_gained: int
    coins_gained: int


def resolve_battle(strength: int, agility: int, rng: Optional[random.Random] = None) -> BattleOutcome:
    """
    Single-shot encounter. The enemy's power is drawn uniformly from
    [20, 70); the player wins only on strictly greater power.
    """
    rng = rng or random
    player_power = strength + agility
    enemy_power = rng.randrange(ENEMY_POWER_MIN, ENEMY_POWER_MAX)
    victory = player_power > enemy_power

    return BattleOutcome(
        player_power=player_power,
        enemy_power=enemy_power,
        victory=victory,
        xp_gained=VICTORY_XP if victory else DEFEAT_XP,
        coins_gained=VICTORY_COINS if victory else DEFEAT_COINS,
    )


# ------------------------------
# Upgrades
# ------------------------------
def upgrade_cost(strength: int = 0, endurance: int = 0, agility: int = 0) -> int:
    return (strength + endurance + agility) * COINS_PER_STAT_POINT


# ------------------------------
# Leaderboard
# ------------------------------
def leaderboard_cutoff(period: str, now: datetime) -> Optional[datetime]:
    """Oldest characters.updated_at that still qualifies for the period."""
    if period not in LEADERBOARD_WINDOWS:
        raise InvalidRequest(
            f"period must be one of: {', '.join(LEADERBOARD_WINDOWS)}"
        )
    window = LEADERBOARD_WINDOWS[period]
    return None if window is None else now - window
