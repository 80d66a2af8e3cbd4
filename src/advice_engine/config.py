# Expected draft round per tier, by position. Fractions sit between rounds,
# e.g. 3.5 is late 3rd to early 4th.
TIER_EXPECTED_ROUNDS = {
    "QB": {
        1: 3,
        2: 3.5,
        3: 6.5,
        4: 8.5,
        5: 10.5,
        6: 13,
        7: 15,
    },
    "RB": {
        1: 1,
        2: 1.5,
        3: 2,
        4: 2.5,
        5: 3.5,
        6: 5,
        7: 7,
        8: 9.5,
        9: 11.5,
        10: 14,
        11: 15,
    },
    "WR": {
        1: 1,
        2: 1.25,
        3: 1.75,
        4: 2,
        5: 2.5,
        6: 3.5,
        7: 6,
        8: 8,
        9: 11,
        10: 13,
    },
    "TE": {
        1: 2.5,
        2: 6.5,
        3: 7.5,
        4: 8.5,
        5: 10,
        6: 13,
        7: 14,
    },
}
UNKNOWN_TIER_ROUND = 15

# Scarcity multipliers keyed by players remaining after the expected run
SCARCITY_THRESHOLDS = (
    (2, 2.0),  # remaining <= 2
    (5, 1.5),  # remaining <= 5
)
DEFAULT_SCARCITY_MULTIPLIER = 1.0

# Roster need multipliers
QB_ELITE_TIER = 2
QB_NEED_MULTIPLIERS = {"elite": 1.6, "other": 1.3}
TE_ELITE_TIER = 1
TE_NEED_MULTIPLIERS = {"elite": 1.8, "other": 1.2}
FLEX_NEED_MULTIPLIER = 1.4  # RB/WR while a starter or FLEX slot is open
RB_DEPTH_MULTIPLIER = 1.3
RB_DEPTH_MAX_OVERALL_RANK = 87  # weakest acceptable 3rd RB
WR_DEPTH_MULTIPLIER = 1.1

# Early-round premium for top-tier players
EARLY_ROUND_THRESHOLD = 3
EARLY_ROUND_MAX_TIER = 2
EARLY_ROUND_BONUS = 1.2

# Additive bonus: max(0, (RANK_BONUS_CEILING - overall_rank) / RANK_BONUS_SCALE)
RANK_BONUS_CEILING = 200
RANK_BONUS_SCALE = 100

# Recommendations and strategy
DEFAULT_TOP_N = 5
DEFAULT_TOP_BY_POSITION = 5
DEFAULT_TOTAL_ROUNDS = 15
RESERVED_FINAL_ROUNDS = 2  # DEF/K
LATE_ROUND_THRESHOLD = 10
