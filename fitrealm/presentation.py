# fitrealm/presentation.py
"""
Server-side view models for the dashboard screens.

Reward amounts are decided here, from what the services actually granted,
and shipped to the client as a ready-to-render list:

    "rewards": [{"type": "xp", "amount": 100, "name": "Daily Login XP"}, ...]

The client only displays this list; it never works out amounts itself.
"""
from typing import Any, Dict, List

from .models.character import Character
from .rules import XP_PER_LEVEL, BattleOutcome, xp_to_next_level
from .services.rewards import DailyReward


def reward(kind: str, amount: int, name: str) -> Dict[str, Any]:
    return {"type": kind, "amount": int(amount), "name": name}


def daily_rewards(granted: DailyReward) -> List[Dict[str, Any]]:
    return [
        reward("xp", granted.xp, "Daily Login XP"),
        reward("coins", granted.coins, "Daily Login Bonus"),
    ]


def battle_rewards(outcome: BattleOutcome) -> List[Dict[str, Any]]:
    if outcome.victory:
        return [
            reward("xp", outcome.xp_gained, "Battle Victory XP"),
            reward("coins", outcome.coins_gained, "Battle Reward"),
        ]
    return [
        reward("xp", outcome.xp_gained, "Battle Experience"),
        reward("coins", outcome.coins_gained, "Consolation Coins"),
    ]


def quest_rewards(quest) -> List[Dict[str, Any]]:
    return [
        reward("xp", quest.xp_reward, f"Quest: {quest.title}"),
        reward("coins", quest.coin_reward, "Quest Reward"),
    ]


def activity_rewards(xp_gained: int) -> List[Dict[str, Any]]:
    if xp_gained <= 0:
        return []
    return [reward("xp", xp_gained, "Workout XP")]


def level_progress(character: Character) -> Dict[str, int]:
    """How far the character is through its current level."""
    xp = int(character.xp or 0)
    return {
        "level": int(character.level or 1),
        "xpIntoLevel": xp % XP_PER_LEVEL,
        "xpPerLevel": XP_PER_LEVEL,
        "xpToNextLevel": xp_to_next_level(xp),
    }


def dashboard(user, character, battles, quests, daily_claimed: bool) -> Dict[str, Any]:
    return {
        "user": user.to_dict(),
        "character": character.to_dict(),
        "progress": level_progress(character),
        "recentBattles": [b.to_dict() for b in battles],
        "openQuests": [q.to_dict() for q in quests],
        "dailyRewardClaimed": daily_claimed,
    }
