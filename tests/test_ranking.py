from referral_leaderboard.services.ranking import assign_ranks, rank_movements


def rows(*counts):
    return [{"id": str(i + 1), "user_id": f"user{i + 1}", "referral_count": c} for i, c in enumerate(counts)]


ORDERED_INPUTS = [
    (),
    (0,),
    (7, 7, 7, 7),
    (9, 8, 7, 6),
    (10, 10, 5),
    (12, 9, 9, 9, 4, 4, 0),
    (3, 2, 2, 1, 1, 1, 0, 0),
]


def test_ties_share_rank_and_next_rank_skips():
    assert [r["rank"] for r in assign_ranks(rows(10, 10, 5))] == [1, 1, 3]


def test_single_entry_is_rank_one():
    assert [r["rank"] for r in assign_ranks(rows(5))] == [1]


def test_empty_input_gives_empty_output():
    assert assign_ranks([]) == []


def test_all_equal_counts_are_all_first():
    assert [r["rank"] for r in assign_ranks(rows(4, 4, 4))] == [1, 1, 1]


def test_zero_counts_are_ranked():
    assert [r["rank"] for r in assign_ranks(rows(2, 0, 0))] == [1, 2, 2]


def test_rank_is_position_after_change_and_previous_rank_otherwise():
    for counts in ORDERED_INPUTS:
        ranked = assign_ranks(rows(*counts))
        for i, row in enumerate(ranked):
            if i == 0 or row["referral_count"] != ranked[i - 1]["referral_count"]:
                assert row["rank"] == i + 1
            else:
                assert row["rank"] == ranked[i - 1]["rank"]


def test_ranks_non_decreasing_and_equal_iff_counts_equal():
    for counts in ORDERED_INPUTS:
        ranked = assign_ranks(rows(*counts))
        ranks = [r["rank"] for r in ranked]
        assert ranks == sorted(ranks)
        for a in ranked:
            for b in ranked:
                assert (a["rank"] == b["rank"]) == (a["referral_count"] == b["referral_count"])


def test_reranking_own_output_is_stable():
    for counts in ORDERED_INPUTS:
        once = assign_ranks(rows(*counts))
        assert assign_ranks(once) == once


def test_input_is_not_mutated():
    source = rows(3, 3)
    assign_ranks(source)
    assert all("rank" not in row for row in source)


def test_movements_by_id():
    before = assign_ranks([
        {"id": "a", "referral_count": 5},
        {"id": "b", "referral_count": 4},
        {"id": "c", "referral_count": 1},
    ])
    after = assign_ranks([
        {"id": "c", "referral_count": 6},
        {"id": "a", "referral_count": 5},
        {"id": "b", "referral_count": 4},
        {"id": "d", "referral_count": 0},
    ])
    assert rank_movements(before, after) == {"c": 2, "a": -1, "b": -1, "d": 0}


def test_movements_without_previous_are_zero():
    current = assign_ranks(rows(2, 1))
    assert rank_movements(None, current) == {"1": 0, "2": 0}
