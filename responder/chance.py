import random
from typing import Optional


def flip_coin(rng: Optional[random.Random] = None) -> str:
    rng = rng or random
    return "Heads" if rng.random() < 0.5 else "Tails"


def roll_die(rng: Optional[random.Random] = None) -> int:
    rng = rng or random
    return rng.randint(1, 6)
