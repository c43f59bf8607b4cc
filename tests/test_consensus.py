import pytest

from seqprob.consensus import Consensus, create_consensus_sequence


def test_matches_contained_symbols():
    consensus = Consensus([0, 2])
    assert consensus.matches(0)
    assert consensus.matches(2)


def test_does_not_match_other_symbols():
    consensus = Consensus([0, 2])
    assert not consensus.matches(1)
    assert not consensus.matches(3)


def test_symbols_round_trip():
    assert Consensus([3, 1]).symbols() == [3, 1]


def test_symbols_returns_copy():
    consensus = Consensus([0, 1])
    consensus.symbols().append(2)
    assert consensus.symbols() == [0, 1]
    assert not consensus.matches(2)


def test_equality_and_contains():
    assert Consensus([0, 1]) == Consensus((0, 1))
    assert 1 in Consensus([0, 1])
    assert 2 not in Consensus([0, 1])


def test_sample_consensus_sequence():
    sequence = create_consensus_sequence()
    assert [c.symbols() for c in sequence] == [
        [0, 1], [0], [2], [2], [3], [0, 2], [0], [2], [3]
    ]


@pytest.mark.parametrize("symbol", [0, 1])
def test_sample_first_position_is_a_or_c(symbol):
    assert create_consensus_sequence()[0].matches(symbol)


def test_sample_sixth_position_rejects_c():
    assert not create_consensus_sequence()[5].matches(1)
    assert create_consensus_sequence()[5].matches(2)