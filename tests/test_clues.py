import pytest

from puzparse.clues import process_clues
from puzparse.errors import InvalidClues
from puzparse.grids import cell_needs_across_clue, cell_needs_down_clue


def _starts(grid):
    across = sum(
        cell_needs_across_clue(grid, r, c)
        for r in range(len(grid))
        for c in range(len(grid[0]))
    )
    down = sum(
        cell_needs_down_clue(grid, r, c)
        for r in range(len(grid))
        for c in range(len(grid[0]))
    )
    return across, down


def test_open_grid_numbering():
    grid = ["---", "---", "---"]
    inputs = ["c0", "c1", "c2", "c3", "c4", "c5"]
    clues = process_clues(grid, inputs)
    assert clues.across == {1: "c0", 4: "c4", 5: "c5"}
    assert clues.down == {1: "c1", 2: "c2", 3: "c3"}


@pytest.mark.parametrize(
    "grid",
    [
        ["---", "-.-", "---"],
        ["--.", "...", ".--"],
        ["-.--.", "-----", "..-.-"],
    ],
)
def test_all_clues_used_once(grid):
    across_count, down_count = _starts(grid)
    inputs = [f"clue {i}" for i in range(across_count + down_count)]
    clues = process_clues(grid, inputs)
    assert len(clues.across) == across_count
    assert len(clues.down) == down_count
    assert sorted(list(clues.across.values()) + list(clues.down.values())) == sorted(inputs)


def test_numbers_are_consecutive_from_one():
    grid = ["-.--.", "-----", "..-.-"]
    across_count, down_count = _starts(grid)
    inputs = [str(i) for i in range(across_count + down_count)]
    clues = process_clues(grid, inputs)
    numbers = set(clues.across) | set(clues.down)
    assert numbers == set(range(1, len(numbers) + 1))


def test_clues_follow_reading_order():
    grid = ["---", "-.-", "---"]
    inputs = ["a", "b", "c", "d"]
    clues = process_clues(grid, inputs)
    ordered = []
    for number in sorted(set(clues.across) | set(clues.down)):
        if number in clues.across:
            ordered.append(clues.across[number])
        if number in clues.down:
            ordered.append(clues.down[number])
    assert ordered == inputs


def test_not_enough_clues():
    with pytest.raises(InvalidClues) as excinfo:
        process_clues(["---", "---"], ["only"])
    assert "Not enough clues provided" in excinfo.value.reason


def test_too_many_clues():
    grid = ["--"]
    with pytest.raises(InvalidClues) as excinfo:
        process_clues(grid, ["one", "two"])
    assert "Too many clues provided" in excinfo.value.reason


def test_empty_grid_no_clues():
    clues = process_clues([], [])
    assert clues.across == {}
    assert clues.down == {}


def test_empty_grid_rejects_extra_clues():
    with pytest.raises(InvalidClues):
        process_clues([], ["stray"])


def test_all_black_grid():
    clues = process_clues(["..", ".."], [])
    assert clues.across == {} and clues.down == {}


def test_single_column_grid_has_only_down():
    clues = process_clues(["-", "-", "."], ["down clue"])
    assert clues.across == {}
    assert list(clues.down.values()) == ["down clue"]