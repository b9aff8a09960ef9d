import pytest

from algolab.dp import (
    MOD,
    coin_combinations,
    dice_combinations,
    fibonacci,
    max_non_adjacent_sum,
    min_coins,
    min_path_sum,
    ninja_training,
)


def test_dice_combinations_small_example():
    assert dice_combinations(3) == 4


def test_dice_combinations_base_cases():
    assert dice_combinations(0) == 1
    assert dice_combinations(-2) == 0


def test_dice_combinations_follow_recurrence():
    for n in range(6, 40):
        expected = sum(dice_combinations(n - face) for face in range(1, 7)) % MOD
        assert dice_combinations(n) == expected


def test_dice_matches_coins_one_to_six():
    for n in range(0, 30):
        assert dice_combinations(n) == coin_combinations([1, 2, 3, 4, 5, 6], n)


def test_dice_large_is_reduced_modulo():
    value = dice_combinations(5000)
    assert 0 <= value < MOD


def test_coin_combinations_example():
    assert coin_combinations([2, 3, 5], 9) == 8


def test_coin_combinations_single_unit_coin():
    for n in range(0, 20):
        assert coin_combinations([1], n) == 1


def test_coin_combinations_unreachable_and_negative():
    assert coin_combinations([2], 7) == 0
    assert coin_combinations([3], -1) == 0


def test_coin_combinations_rejects_non_positive_coin():
    with pytest.raises(ValueError):
        coin_combinations([0, 1], 5)
    with pytest.raises(ValueError):
        min_coins([-1, 2], 5)


def test_fibonacci_base_cases():
    assert fibonacci(0) == 0
    assert fibonacci(1) == 1


def test_fibonacci_recurrence_including_large_n():
    for n in list(range(2, 30)) + [1000]:
        assert fibonacci(n) == fibonacci(n - 1) + fibonacci(n - 2)


def test_min_path_sum_example():
    assert min_path_sum([[1, 3, 1], [1, 5, 1], [4, 2, 1]]) == 7


def test_min_path_sum_single_row_and_column():
    row = [4, 1, 8, 2]
    assert min_path_sum([row]) == sum(row)
    assert min_path_sum([[v] for v in row]) == sum(row)


def test_min_path_sum_bounds():
    grid = [[2, 9, 9], [2, 9, 9], [2, 2, 2]]
    assert min_path_sum(grid) == sum([2, 2, 2, 2, 2])
    assert min_path_sum(grid) >= grid[0][0] + grid[-1][-1]


def test_min_path_sum_rejects_bad_grid():
    with pytest.raises(ValueError):
        min_path_sum([])
    with pytest.raises(ValueError):
        min_path_sum([[1, 2], [3]])


def test_max_non_adjacent_sum_small_inputs():
    assert max_non_adjacent_sum([7]) == 7
    assert max_non_adjacent_sum([3, 9]) == 9


def test_max_non_adjacent_sum_alternating_zeros():
    values = [5, 0, 6, 0, 4]
    assert max_non_adjacent_sum(values) == sum(values[::2])


def test_max_non_adjacent_sum_bounds_for_non_negative():
    values = [2, 7, 9, 3, 1, 8, 4]
    result = max_non_adjacent_sum(values)
    assert result >= max(values)
    assert result >= sum(values[::2])
    assert result >= sum(values[1::2])
    assert result <= sum(values)


def test_max_non_adjacent_sum_empty_raises():
    with pytest.raises(ValueError):
        max_non_adjacent_sum([])


def test_min_coins_unit_coin_and_exact_coin():
    assert min_coins([1], 13) == 13
    assert min_coins([1, 5, 7], 7) == 1
    assert min_coins([1, 5, 7], 0) == 0


def test_min_coins_impossible():
    assert min_coins([2], 3) == -1
    assert min_coins([4, 6], 9) == -1
    assert min_coins([1], -3) == -1


def test_min_coins_optimal_substructure():
    coins = [1, 5, 7]
    for target in range(1, 40):
        result = min_coins(coins, target)
        for coin in coins:
            if coin <= target:
                assert result <= min_coins(coins, target - coin) + 1


def test_ninja_training_single_day():
    row = [3, 11, 6]
    assert ninja_training([row]) == max(row)


def test_ninja_training_cannot_repeat_task():
    assert ninja_training([[10, 0, 0], [10, 0, 0]]) == 10


def test_ninja_training_equal_rows():
    days = [[5, 5, 5]] * 4
    assert ninja_training(days) == 5 * len(days)


def test_ninja_training_upper_bound():
    points = [[1, 2, 5], [3, 1, 1], [3, 3, 3], [9, 1, 4]]
    assert ninja_training(points) <= sum(max(row) for row in points)


def test_ninja_training_validates_input():
    with pytest.raises(ValueError):
        ninja_training([])
    with pytest.raises(ValueError):
        ninja_training([[1, 2]])