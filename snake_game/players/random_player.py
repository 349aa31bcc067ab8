"""
Random player implementation - picks random safe moves.
"""

import random
from typing import List, Optional

from domain.constants import VALID_MOVES, Direction
from domain.position import translate
from domain.snapshot import GameSnapshot
from .base import Player


class RandomPlayer(Player):
    """
    A random AI that picks a direction that avoids walls, obstacles and
    self-collisions.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def safe_moves(self, game_state: GameSnapshot) -> List[Direction]:
        head = game_state.head
        if head is None:
            return []

        border = game_state.border_thickness
        blocked = game_state.obstacle_cells()
        # The tail moves away on the next tick, so it is not counted.
        body = set(game_state.snake_body[1:])

        valid_moves: List[Direction] = []
        for move in sorted(VALID_MOVES, key=lambda d: d.value):
            if move == game_state.direction.opposite:
                continue
            new_x, new_y = translate(head, move)

            # Check wall collisions
            if (new_x < border or new_x >= game_state.width - border or
                    new_y < border or new_y >= game_state.height - border):
                continue

            if (new_x, new_y) in blocked or (new_x, new_y) in body:
                continue

            valid_moves.append(move)
        return valid_moves

    def get_move(self, game_state: GameSnapshot) -> Optional[Direction]:
        valid_moves = self.safe_moves(game_state)

        # Nothing is safe: keep going and take the hit
        if not valid_moves:
            return None

        # Head for the food when a safe move gets closer to it
        head = game_state.head
        fx, fy = game_state.food
        distance = abs(head.x - fx) + abs(head.y - fy)
        closer = [
            move for move in valid_moves
            if abs(translate(head, move).x - fx) + abs(translate(head, move).y - fy) < distance
        ]
        return self.rng.choice(closer or valid_moves)
