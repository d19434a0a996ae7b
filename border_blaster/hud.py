"""
HUD - current region and latest message, drawn under the map.
"""

from __future__ import annotations

from tile_engine.core import Event, EventBus
from tile_engine.graphics import FontConfig, SurfaceRenderer
from border_blaster import settings
from border_blaster.simulation import GameEvent


TITLE_FONT = FontConfig(size=settings.HUD_TITLE_FONT_SIZE, bold=True)
TEXT_FONT = FontConfig(size=settings.HUD_TEXT_FONT_SIZE)


class Hud:
    """
    Keeps the two HUD strings up to date from simulation events.

    An NPC greeting replaces the region fact until the next move
    announces a region again.
    """

    def __init__(self, event_bus: EventBus):
        self.event_bus = event_bus
        self.region_name = ""
        self.message = ""

        event_bus.subscribe(GameEvent.REGION_ENTERED, self._on_region_entered)
        event_bus.subscribe(GameEvent.NPC_INTERACTION, self._on_npc_interaction)

    def detach(self) -> None:
        """Stop listening for simulation events."""
        self.event_bus.unsubscribe(GameEvent.REGION_ENTERED, self._on_region_entered)
        self.event_bus.unsubscribe(GameEvent.NPC_INTERACTION, self._on_npc_interaction)

    def _on_region_entered(self, event: Event) -> None:
        region = event["region"]
        self.region_name = region.name
        self.message = region.fact

    def _on_npc_interaction(self, event: Event) -> None:
        self.message = event["message"]

    def render(self, renderer: SurfaceRenderer) -> None:
        """Draw the HUD panel onto its own surface."""
        pad = settings.HUD_PADDING
        renderer.clear(settings.HUD_BACKGROUND)

        title_rect = renderer.draw_text(
            self.region_name, pad, pad,
            color=settings.HUD_TITLE_COLOR, font_config=TITLE_FONT,
        )
        renderer.draw_text(
            self.message, pad, title_rect.bottom + pad // 2,
            color=settings.HUD_TEXT_COLOR, font_config=TEXT_FONT,
            max_width=settings.WINDOW_WIDTH - pad * 2,
        )
