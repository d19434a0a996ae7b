"""
Interaction detector - NPCs the player is standing next to.
"""

from __future__ import annotations

from typing import Iterable, Optional

from border_blaster.components import NPC, Player, manhattan_distance


# Only direct cardinal neighbours talk; sharing a tile does not count
INTERACTION_DISTANCE = 1


def find_adjacent_npc(player: Player, npcs: Iterable[NPC]) -> Optional[NPC]:
    """
    Get the first NPC, in sequence order, directly next to the player.

    Returns:
        The NPC, or None if nobody is adjacent
    """
    for npc in npcs:
        if manhattan_distance(*npc.position, *player.position) == INTERACTION_DISTANCE:
            return npc
    return None


def interaction_message(npc: NPC) -> str:
    """HUD line for an NPC greeting."""
    return f"{npc.name}: {npc.dialog}"
