"""Test suite for substitution cost functions."""

import pytest
from phonlev.core import VOICING_PAIRS, identity_cost, paired_consonant, phonetic_cost


PAIRS = [("p", "b"), ("t", "d"), ("k", "g"), ("f", "v"), ("s", "z")]


class TestIdentityCost:
    """Test plain 0/1 cost."""

    def test_equal(self):
        assert identity_cost(ord("a"), ord("a")) == 0

    def test_different(self):
        assert identity_cost(ord("a"), ord("b")) == 1
        assert identity_cost(ord("p"), ord("b")) == 1


class TestPhoneticCost:
    """Test voiced/voiceless pair cost."""

    @pytest.mark.parametrize("voiceless,voiced", PAIRS)
    def test_pairs_are_free_both_ways(self, voiceless, voiced):
        assert phonetic_cost(ord(voiceless), ord(voiced)) == 0
        assert phonetic_cost(ord(voiced), ord(voiceless)) == 0

    def test_equal(self):
        assert phonetic_cost(ord("e"), ord("e")) == 0

    def test_unpaired(self):
        assert phonetic_cost(ord("p"), ord("d")) == 1
        assert phonetic_cost(ord("a"), ord("e")) == 1
        # Pairs are lowercase only
        assert phonetic_cost(ord("P"), ord("b")) == 1

    def test_symmetric(self):
        symbols = [ord(c) for c in "pbtdkgfvszaeP"]
        for a in symbols:
            for b in symbols:
                assert phonetic_cost(a, b) == phonetic_cost(b, a)

    def test_free_exactly_for_paired_consonants(self):
        symbols = [ord(c) for c in "pbtdkgfvszaemP"]
        for a in symbols:
            for b in symbols:
                expected = 0 if a == b or paired_consonant(a) == b else 1
                assert phonetic_cost(a, b) == expected

    def test_never_above_identity(self):
        symbols = [ord(c) for c in "pbtdkgfvszae"]
        for a in symbols:
            for b in symbols:
                assert phonetic_cost(a, b) <= identity_cost(a, b)


class TestVoicingPairs:
    """Test the pair table."""

    def test_contents(self):
        assert dict(VOICING_PAIRS) == {ord(a): ord(b) for a, b in PAIRS}

    def test_read_only(self):
        with pytest.raises(TypeError):
            VOICING_PAIRS[ord("m")] = ord("n")

    def test_paired_consonant(self):
        assert paired_consonant(ord("t")) == ord("d")
        assert paired_consonant(ord("d")) == ord("t")
        assert paired_consonant(ord("m")) is None
