"""
Fixed game configuration.

All sizes are in pixels unless noted. Nothing here is computed per
frame.
"""

# Grid
TILE_SIZE = 64
GRID_WIDTH = 10  # tiles
GRID_HEIGHT = 10  # tiles

MAP_PIXEL_WIDTH = GRID_WIDTH * TILE_SIZE
MAP_PIXEL_HEIGHT = GRID_HEIGHT * TILE_SIZE

# HUD strip below the map
HUD_HEIGHT = 80
HUD_PADDING = 10
HUD_BACKGROUND = "#2d3436"
HUD_TITLE_COLOR = "#ffffff"
HUD_TEXT_COLOR = "#dfe6e9"
HUD_TITLE_FONT_SIZE = 24
HUD_TEXT_FONT_SIZE = 18

WINDOW_TITLE = "Border Blaster"
WINDOW_WIDTH = MAP_PIXEL_WIDTH
WINDOW_HEIGHT = MAP_PIXEL_HEIGHT + HUD_HEIGHT
TARGET_FPS = 60

# Map overlay
CLEAR_COLOR = "#00000000"
GRID_LINE_COLOR = "#0000000d"  # black at ~5% opacity
GRID_LINE_WIDTH = 1

# Markers
NPC_COLOR = "#2ecc71"
NPC_RADIUS = TILE_SIZE / 3
NPC_LABEL = "NPC"
NPC_FONT_SIZE = 12

PLAYER_COLOR = "#34495e"
PLAYER_RADIUS = TILE_SIZE / 2.5
PLAYER_LABEL = "You"
PLAYER_FONT_SIZE = 14

LABEL_COLOR = "#ffffff"

# Starting tile
PLAYER_START = (1, 1)
