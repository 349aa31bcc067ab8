"""
Text shown between levels and at the end of a game.
"""

CONTINUE_HINT = "Press SPACE to continue"
EXIT_HINT = "Press any key to exit"


def level_complete_message(level: int, score: int) -> str:
    return f"Level {level} Complete!\nScore: {score}\n{CONTINUE_HINT}"


def victory_message(score: int, max_levels: int) -> str:
    return f"VICTORY!\nFinal Score: {score}\nAll {max_levels} Levels Complete!\n{EXIT_HINT}"


def game_over_message(score: int, current_level: int, max_levels: int) -> str:
    return f"GAME OVER!\nFinal Score: {score}\nLevel {current_level} of {max_levels}\n{EXIT_HINT}"
