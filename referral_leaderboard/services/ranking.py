"""
Competition ranking for the leaderboard.

Entries arrive sorted by ``referral_count`` descending. Tied entries share a
rank and the next distinct count resumes at its 1-based position, so counts
``[10, 10, 5]`` rank as ``[1, 1, 3]`` ("1224" style). Ranks are never stored;
they are recomputed from the full ordered set after every fetch.
"""

from typing import Any, Dict, Iterable, List, Mapping, Optional


def assign_ranks(entries: Iterable[Mapping[str, Any]]) -> List[Dict[str, Any]]:
    """Return copies of ``entries`` with a ``rank`` key added.

    The input is left untouched, and feeding the output back in yields the
    same ranks.
    """
    ranked = []
    current_rank = 0
    prev_count = -1  # counts are non-negative
    for index, entry in enumerate(entries):
        count = entry["referral_count"]
        if count != prev_count:
            current_rank = index + 1
        row = dict(entry)
        row["rank"] = current_rank
        ranked.append(row)
        prev_count = count
    return ranked


def rank_movements(
    previous: Optional[Iterable[Mapping[str, Any]]],
    current: Iterable[Mapping[str, Any]],
) -> Dict[str, int]:
    """Map entry id to how many places it climbed since ``previous``.

    Positive means the entry moved up, negative down. Entries that were not
    in ``previous`` (new users, or the first load) get 0.
    """
    before = {row["id"]: row["rank"] for row in (previous or [])}
    return {
        row["id"]: before[row["id"]] - row["rank"] if row["id"] in before else 0
        for row in current
    }
