"""
Border Blaster

A tiny tile-based exploration game: walk a 10x10 map of regions,
read a fact about each one, and chat with the locals.

Layout:
    components  Player / NPC records and grid directions
    world       Region registry, world grid, built-in content
    systems     Movement, interaction detection, world rendering
    simulation  Explicit simulation state and its events
    hud         Region name / message panel
    scene       Per-frame glue between input, simulation and display
"""

__version__ = "0.1.0"
