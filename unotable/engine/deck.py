"""Infinite card source.

Instead of a physical 108-card deck that has to be tracked and reshuffled,
every draw samples one of the 108 card slots uniformly. The slot layout
mirrors a standard deck's proportions, so the long-run distribution of
colors and types is the same.
"""

import random
from typing import Optional

from unotable.engine.card import Card, CardType, Color

DECK_SIZE = 108
BUCKETS_PER_COLOR = 27

SEED_COLORS = (Color.RED, Color.GREEN, Color.BLUE, Color.YELLOW)


def _card_type_for_bucket(bucket: int) -> tuple[CardType, Optional[int]]:
    # 0 has one bucket, 1-9 have two each
    if bucket == 0:
        return CardType.NUMBER, 0
    if 1 <= bucket <= 9:
        return CardType.NUMBER, bucket
    if 10 <= bucket <= 18:
        return CardType.NUMBER, bucket - 9
    if bucket <= 20:
        return CardType.SKIP, None
    if bucket <= 22:
        return CardType.REVERSE, None
    if bucket <= 24:
        return CardType.DRAW_TWO, None
    if bucket == 25:
        return CardType.WILDCARD, None
    return CardType.DRAW_FOUR_WILDCARD, None


def card_from_seed(seed: int) -> Card:
    """Map a slot number in [0, 107] to a card.

    - seed % 27 picks the type bucket
    - seed // 27 picks the color (Red, Green, Blue, Yellow), ignored for wilds
    """
    if not 0 <= seed < DECK_SIZE:
        raise ValueError(f"Card seed must be in [0, {DECK_SIZE - 1}], got {seed}")

    card_type, number = _card_type_for_bucket(seed % BUCKETS_PER_COLOR)
    if card_type in (CardType.WILDCARD, CardType.DRAW_FOUR_WILDCARD):
        return Card.wild(card_type)
    return Card(card_type=card_type, color=SEED_COLORS[seed // BUCKETS_PER_COLOR], number=number)


class CardSource:
    """Unbounded, uniformly random supply of cards."""

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)

    def draw(self) -> Card:
        return card_from_seed(self._rng.randint(0, DECK_SIZE - 1))
