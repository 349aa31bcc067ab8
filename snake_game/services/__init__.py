"""
Game services: collision checks, scoring, level progression, obstacle
patterns and player-facing messages.
"""
