import itertools
import random

import pytest

from bitblocks import BitVector, Counter, ResetDiscipline, InvalidModulusError, counter_width

DISCIPLINES = list(ResetDiscipline)


def test_counter_width():
    widths = {1: 1, 2: 1, 3: 2, 4: 2, 5: 3, 8: 3, 9: 4, 16: 4, 17: 5}
    for modulus, width in widths.items():
        assert counter_width(modulus) == width


@pytest.mark.parametrize("modulus", [0, -1, -8])
def test_invalid_modulus(modulus):
    with pytest.raises(InvalidModulusError):
        Counter(modulus)
    with pytest.raises(ValueError):
        counter_width(modulus)


def test_non_integer_modulus():
    with pytest.raises(TypeError):
        Counter(2.5)


def test_reset_discipline_from_string():
    assert Counter(3, "async").reset_discipline is ResetDiscipline.ASYNCHRONOUS
    assert Counter(3, "sync").reset_discipline is ResetDiscipline.SYNCHRONOUS
    with pytest.raises(ValueError):
        Counter(3, "level")


def test_initial_state():
    counter = Counter(6)
    assert counter.value == BitVector(3, 0)
    assert int(counter) == 0
    assert not counter.reset


def test_power_of_two_detection():
    assert not Counter(5).is_power_of_two
    assert Counter(8).is_power_of_two
    assert Counter(8).fills_register
    assert not Counter(8).uses_comparator
    assert Counter(8, optimize=False).uses_comparator
    # A one-bit register wraps at two, so a modulus of one still needs the comparator
    assert Counter(1).is_power_of_two
    assert not Counter(1).fills_register
    assert Counter(1).uses_comparator


def test_power_of_two_async_only_increments():
    counter = Counter(8, ResetDiscipline.ASYNCHRONOUS)
    assert counter._next_value == counter._increment
    assert counter._wrap_conditions == ()


def test_power_of_two_sync_folds_only_reset():
    counter = Counter(8, ResetDiscipline.SYNCHRONOUS)
    assert counter._wrap_conditions == (counter._reset_asserted,)
    assert counter._next_value != counter._increment


def test_general_modulus_compares_against_last():
    counter = Counter(5, ResetDiscipline.ASYNCHRONOUS)
    assert counter._wrap_conditions == (counter._at_last,)

    counter = Counter(8, ResetDiscipline.SYNCHRONOUS, optimize=False)
    assert counter._wrap_conditions == (counter._at_last, counter._reset_asserted)


def test_modulus_five_sync_sequence():
    counter = Counter(5, ResetDiscipline.SYNCHRONOUS)
    assert [int(v) for v in counter.run(12)] == [1, 2, 3, 4, 0, 1, 2, 3, 4, 0, 1, 2]


def test_modulus_eight_async_sequence():
    counter = Counter(8, ResetDiscipline.ASYNCHRONOUS)
    assert not counter.uses_comparator
    values = [int(v) for v in counter.run(17)]
    assert values == [1, 2, 3, 4, 5, 6, 7, 0, 1, 2, 3, 4, 5, 6, 7, 0, 1]
    assert counter.value.width == 3


def test_modulus_one_stays_at_zero():
    counter = Counter(1)
    assert [int(v) for v in counter.run(4)] == [0, 0, 0, 0]


@pytest.mark.parametrize("discipline", DISCIPLINES)
@pytest.mark.parametrize("modulus", range(1, 20))
def test_counts_and_wraps(modulus, discipline):
    counter = Counter(modulus, discipline)
    for k in range(1, modulus):
        assert int(counter.tick()) == k
        assert counter.value.width == counter_width(modulus)
    assert int(counter.tick()) == 0


@pytest.mark.parametrize("discipline", DISCIPLINES)
@pytest.mark.parametrize("modulus", [1, 2, 4, 8, 16, 32])
def test_power_of_two_paths_agree(modulus, discipline):
    rng = random.Random(modulus)
    optimized = Counter(modulus, discipline)
    general = Counter(modulus, discipline, optimize=False)

    for _ in range(200):
        level = rng.random() < 0.1
        if rng.random() < 0.5:
            optimized.drive_reset(level)
            general.drive_reset(level)
            assert optimized.value == general.value
        assert optimized.tick(reset=level) == general.tick(reset=level)


def test_async_reset_is_immediate():
    counter = Counter(10, ResetDiscipline.ASYNCHRONOUS)
    for _ in range(3):
        counter.tick()
    assert int(counter) == 3

    counter.drive_reset(True)
    assert int(counter) == 0
    assert int(counter.tick()) == 0

    counter.drive_reset(False)
    assert int(counter.tick()) == 1


def test_async_reset_dominates_tick():
    counter = Counter(8, ResetDiscipline.ASYNCHRONOUS)
    counter.tick()
    assert int(counter.tick(reset=True)) == 0


def test_sync_reset_waits_for_tick():
    counter = Counter(10, ResetDiscipline.SYNCHRONOUS)
    for _ in range(3):
        counter.tick()

    counter.drive_reset(True)
    assert int(counter) == 3
    assert int(counter.tick()) == 0

    assert int(counter.tick(reset=False)) == 1


@pytest.mark.parametrize("discipline", DISCIPLINES)
@pytest.mark.parametrize("modulus", [3, 8])
def test_held_reset_keeps_zero(modulus, discipline):
    counter = Counter(modulus, discipline)
    counter.tick()
    counter.tick()
    values = [int(counter.tick(reset=True)) for _ in range(5)]
    assert values == [0] * 5
    assert int(counter.tick(reset=False)) == 1


def test_reset_at_last_value():
    for discipline, modulus in itertools.product(DISCIPLINES, [5, 8]):
        counter = Counter(modulus, discipline)
        for _ in range(modulus - 1):
            counter.tick()
        assert int(counter) == modulus - 1
        assert int(counter.tick(reset=True)) == 0
