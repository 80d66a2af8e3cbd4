"""Snake-draft pick tracking.

Picks are numbered from 1. Odd rounds run in draft order (1 -> N) and even
rounds run in reverse (N -> 1).
"""

from typing import Tuple


def get_round_and_pick(total_picks_made: int, num_teams: int) -> Tuple[int, int]:
    """Return the ``(round, pick)`` of the pick about to be made."""
    if total_picks_made == 0:
        return 1, 1

    pick_number = total_picks_made + 1
    current_round = (pick_number - 1) // num_teams + 1
    current_pick = (pick_number - 1) % num_teams + 1
    return current_round, current_pick


def is_user_turn(
    current_round: int, current_pick: int, user_position: int, num_teams: int
) -> bool:
    """Whether the user is on the clock for the given round and pick."""
    if current_round % 2 == 1:
        return current_pick == user_position
    return current_pick == num_teams - user_position + 1


def picks_until_next_turn(
    current_round: int, current_pick: int, user_position: int, num_teams: int
) -> int:
    """Count picks until the user is next on the clock (0 means now).

    Raises:
        ValueError: If the user never comes up within two rounds, which only
            happens when ``user_position`` is outside ``[1, num_teams]``.
    """
    if is_user_turn(current_round, current_pick, user_position, num_teams):
        return 0

    picks = 0
    round_, pick = current_round, current_pick
    while picks < 2 * num_teams:
        pick += 1
        picks += 1
        if pick > num_teams:
            round_ += 1
            pick = 1
        if is_user_turn(round_, pick, user_position, num_teams):
            return picks

    raise ValueError(
        f"User draft position {user_position} never picks in a "
        f"{num_teams}-team draft"
    )
