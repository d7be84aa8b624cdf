import pytest

from dsakit.hashing import (
    CollisionError,
    DirectHashTable,
    ProbingTable,
    is_prime,
    next_prime,
)


def test_probing_insert_and_search_agree():
    table = ProbingTable()
    first = table.insert(12)
    second = table.insert(22)
    assert first != second
    assert table.search(12) == first
    assert table.search(22) == second


def test_probing_home_slot_is_key_modulo_size():
    table = ProbingTable(10)
    assert table.insert(37) == 37 % 10


def test_probing_collision_moves_to_next_slot():
    table = ProbingTable(10)
    home = table.insert(5)
    assert table.insert(15) == home + 1


def test_probing_wraps_around():
    table = ProbingTable(10)
    table.insert(9)
    assert table.insert(19) == 0


def test_probing_full_table_raises():
    table = ProbingTable(3)
    for key in (1, 2, 3):
        table.insert(key)
    with pytest.raises(OverflowError):
        table.insert(4)


def test_probing_search_missing():
    table = ProbingTable()
    table.insert(3)
    assert table.search(13) is None


def test_probing_rows():
    table = ProbingTable(4)
    index = table.insert(6)
    rows = table.rows()
    assert len(rows) == 4
    assert rows[index] == (index, 6)
    assert sum(1 for _, key in rows if key is None) == 3


def test_is_prime_small_numbers():
    primes = [n for n in range(30) if is_prime(n)]
    assert primes == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]


@pytest.mark.parametrize("n", [0, 1, 4, 9, 25, -7])
def test_non_primes(n):
    assert is_prime(n) is False


@pytest.mark.parametrize("n", [1, 8, 10, 14, 24, 90])
def test_next_prime_invariants(n):
    result = next_prime(n)
    assert result >= n
    assert is_prime(result)
    assert all(not is_prime(k) for k in range(n + 1, result) if k % 2)


def test_direct_table_capacity_is_prime():
    table = DirectHashTable()
    assert table.capacity == next_prime(10)
    assert len(table.slots()) == table.capacity


def test_direct_insert_update_and_remove():
    table = DirectHashTable()
    table.insert(5, "first")
    assert len(table) == 1
    table.insert(5, "second")
    assert len(table) == 1
    assert table.get(5) == "second"
    assert 5 in table
    table.remove(5)
    assert len(table) == 0
    assert 5 not in table


def test_direct_collision():
    table = DirectHashTable()
    table.insert(5, "a")
    with pytest.raises(CollisionError):
        table.insert(5 + table.capacity, "b")
    assert table.get(5) == "a"


def test_direct_remove_missing():
    table = DirectHashTable()
    with pytest.raises(KeyError):
        table.remove(3)
    table.insert(3, "x")
    with pytest.raises(KeyError):
        table.remove(3 + table.capacity)


def test_direct_slots_layout():
    table = DirectHashTable()
    table.insert(4, "v")
    slots = table.slots()
    assert slots[4 % table.capacity] == (4, "v")
    assert sum(slot is None for slot in slots) == table.capacity - 1