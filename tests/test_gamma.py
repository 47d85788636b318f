import pytest

from settlersfmt.gamma import GammaTable


def test_end_points():
    table = GammaTable(128)
    assert table[0] == 0
    assert table[127] == 127


def test_linear_table_stays_close_to_identity():
    table = GammaTable(128)
    assert all(abs(table[i] - i) <= 1 for i in range(128))


@pytest.mark.parametrize("gamma", [0.5, 1.0, 2.2])
def test_table_is_monotonic(gamma):
    table = GammaTable(128, gamma)
    values = [table[i] for i in range(len(table))]
    assert values == sorted(values)


def test_high_gamma_raises_values():
    table = GammaTable(128, 2.0)
    assert all(table[i] >= i - 1 for i in range(128))
    assert table[64] > 64


def test_low_gamma_lowers_values():
    table = GammaTable(128, 0.5)
    assert all(table[i] <= i for i in range(128))
    assert table[64] < 64


def test_small_size_is_raised_to_two():
    table = GammaTable(0)
    assert len(table) == 2
    assert (table[0], table[1]) == (0, 1)


def test_gamma_is_clamped():
    table = GammaTable(16, 0.0)
    assert table.gamma == pytest.approx(0.001)


def test_set_gamma_recomputes():
    table = GammaTable(128)
    before = table[64]
    table.set_gamma(2.0)
    assert table.gamma == 2.0
    assert table[64] > before
    table.set_gamma(1.0)
    assert table[64] == before


def test_index_out_of_range():
    table = GammaTable(4)
    assert len(table) == 4
    assert table[3] == 3
    with pytest.raises(IndexError):
        table[4]