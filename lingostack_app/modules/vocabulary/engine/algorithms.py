# File: lingostack_app/modules/vocabulary/engine/algorithms.py
# Order and language selection helpers for study sessions. No Flask access.

import random
from typing import List, Optional, Sequence, Tuple


def build_order(total: int, shuffle: bool, rng: Optional[random.Random] = None) -> List[int]:
    """Indices into the record list: identity order, or a uniform shuffle."""
    order = list(range(total))
    if shuffle and total > 1:
        (rng or random).shuffle(order)
    return order


def wrap_position(position: int, total: int) -> int:
    """Keep a position inside ``[0, total)``, wrapping in both directions."""
    if total <= 0:
        return 0
    return position % total


def progress_percent(position: int, total: int) -> float:
    if total <= 0:
        return 0.0
    return (position + 1) / total * 100


def resolve_languages(
    available: Sequence[str],
    prompt: Optional[str],
    answer: Optional[str],
) -> Tuple[str, str]:
    """
    Pick a valid (prompt, answer) pair from *available*.

    Requested languages are kept when they are available and distinct;
    otherwise the first available languages fill in.
    """
    if len(available) < 2:
        raise ValueError('At least two languages are required')

    if prompt not in available:
        prompt = available[0]
    if answer not in available or answer == prompt:
        answer = next(lang for lang in available if lang != prompt)
    return prompt, answer
