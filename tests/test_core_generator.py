"""
Tests for CoreGenerator (xoroshiro128+).

Golden values come from the published xoroshiro128+ reference seeded
through splitmix64.
"""

import copy
import itertools

import pytest

from core_types import MASK64, CoreState
from generators.core_generator import CoreGenerator
from generators.seed_mixer import SeedMixer


SEED1_OUTPUTS = [0x4FF5BB8DEE914928, 0xF00568DB34FBB666, 0x0E9FD07A18CA873A, 0x67F9681F781744DE]
SEED1_AFTER_JUMP = [0xE0EDA4D9A605039F, 0x2B9E3DF537315EAD, 0xE0577DB652A98EC5]
SEED1_AFTER_TWO_JUMPS = 0x5EDA0C1BA2CD350F
SEED0_OUTPUTS = [0x509946A41CD733A3, 0x00885667B1934BFA]


class TestSeeding:
    def test_default_seed_is_one(self):
        assert CoreGenerator.DEFAULT_SEED == 1
        assert CoreGenerator().state == CoreGenerator(1).state

    def test_state_is_first_two_mixer_draws(self):
        mixer = SeedMixer(1)
        expected = CoreState(mixer.next(), mixer.next())
        assert CoreGenerator(1).state == expected

    def test_first_draw_is_sum_of_mixer_draws(self):
        mixer = SeedMixer(1)
        expected = (mixer.next() + mixer.next()) & MASK64
        assert expected == SEED1_OUTPUTS[0]
        assert CoreGenerator(1).next() == expected

    def test_golden_seed_1(self):
        gen = CoreGenerator(1)
        assert [gen.next() for _ in range(4)] == SEED1_OUTPUTS

    def test_golden_seed_0(self):
        gen = CoreGenerator(0)
        assert [gen.next() for _ in range(2)] == SEED0_OUTPUTS

    def test_seed_from_mixer_sequence_matches_integer_seed(self):
        a = CoreGenerator(SeedMixer(42))
        b = CoreGenerator(42)
        assert a.state == b.state
        assert a.next() == 0xE6C71559E2525F98

    def test_seed_from_custom_sequence_word_order(self):
        class Counting:
            def generate(self, buffer, start=0, end=None):
                for i in range(start, end):
                    buffer[i] = i + 1

        gen = CoreGenerator(Counting())
        assert gen.state == CoreState(0x0000000200000001, 0x0000000400000003)

    def test_sequence_words_are_truncated_to_32_bits(self):
        class Wide:
            def generate(self, buffer, start=0, end=None):
                for i in range(start, end):
                    buffer[i] = (1 << 40) | 0xAB

        gen = CoreGenerator(Wide())
        assert gen.state == CoreState(0x000000AB000000AB, 0x000000AB000000AB)

    def test_reseed_resets_stream(self):
        gen = CoreGenerator(1)
        gen.discard(10)
        gen.seed(1)
        assert gen.next() == SEED1_OUTPUTS[0]
        gen.seed()
        assert gen.next() == SEED1_OUTPUTS[0]

    def test_non_integer_seed_rejected(self):
        with pytest.raises(TypeError):
            CoreGenerator("seed")

    def test_determinism(self):
        a = CoreGenerator(0xDEADBEEF)
        b = CoreGenerator(0xDEADBEEF)
        assert [a.next() for _ in range(500)] == [b.next() for _ in range(500)]


class TestTransition:
    def test_small_state_by_hand(self):
        # result = 1 + 2; s1' = 3
        # s0 = rotl(1, 55) ^ 3 ^ (3 << 14); s1 = rotl(3, 36)
        gen = CoreGenerator.from_state(1, 2)
        assert gen.next() == 3
        assert gen.state == CoreState(0x008000000000C003, 0x0000003000000000)

    def test_rotation_wraps_high_bits(self):
        gen = CoreGenerator.from_state(1 << 63, 0)
        assert gen.next() == 1 << 63
        assert gen.state == CoreState((1 << 63) | (1 << 54), 1 << 35)

    def test_sum_wraps_around(self):
        assert CoreGenerator.from_state(MASK64, 1).next() == 0

    def test_zero_state_is_absorbing(self):
        gen = CoreGenerator.from_state(0, 0)
        for _ in range(1000):
            assert gen.next() == 0
        assert gen.state == CoreState(0, 0)
        gen.jump()
        assert gen.state == CoreState(0, 0)

    def test_state_setter_accepts_pair(self):
        gen = CoreGenerator(5)
        gen.state = (0, 0)
        assert gen.next() == 0
        gen.state = CoreState(1, 2)
        assert gen.next() == 3

    def test_call_and_iteration_alias_next(self):
        assert CoreGenerator(1)() == SEED1_OUTPUTS[0]
        assert next(CoreGenerator(1)) == SEED1_OUTPUTS[0]
        assert list(itertools.islice(CoreGenerator(1), 4)) == SEED1_OUTPUTS

    def test_bounds(self):
        gen = CoreGenerator(99)
        for _ in range(10_000):
            v = gen.next()
            assert CoreGenerator.MIN <= v <= CoreGenerator.MAX
        assert CoreGenerator.min() == 1
        assert CoreGenerator.max() == MASK64
        assert CoreGenerator.RESULT_BITS == 64


class TestDiscard:
    @pytest.mark.parametrize("n", [0, 1, 2, 50])
    def test_discard_then_next_is_n_plus_first(self, n):
        reference = CoreGenerator(7)
        expected = [reference.next() for _ in range(n + 1)][-1]
        gen = CoreGenerator(7)
        gen.discard(n)
        assert gen.next() == expected

    def test_discard_golden(self):
        gen = CoreGenerator(1)
        gen.discard(3)
        assert gen.next() == SEED1_OUTPUTS[3]

    def test_negative_discard_rejected(self):
        with pytest.raises(ValueError):
            CoreGenerator(1).discard(-5)


class TestJump:
    def test_golden_jump(self):
        gen = CoreGenerator(1)
        gen.jump()
        assert [gen.next() for _ in range(3)] == SEED1_AFTER_JUMP

    def test_golden_two_jumps(self):
        gen = CoreGenerator(1)
        gen.jump()
        gen.jump()
        assert gen.next() == SEED1_AFTER_TWO_JUMPS

    def test_jump_is_pure_function_of_state(self):
        a = CoreGenerator.from_state(0x0123456789ABCDEF, 0xFEDCBA9876543210)
        b = CoreGenerator.from_state(0x0123456789ABCDEF, 0xFEDCBA9876543210)
        a.jump()
        b.jump()
        assert a.state == b.state

    def test_jump_moves_away_from_current_stream(self):
        base = CoreGenerator(1)
        jumped = copy.copy(base)
        jumped.jump()
        assert jumped.state != base.state
        upcoming = {base.next() for _ in range(1000)}
        assert not upcoming & {jumped.next() for _ in range(1000)}


class TestCopyAndRepr:
    def test_copy_is_independent(self):
        gen = CoreGenerator(1)
        clone = copy.copy(gen)
        gen.discard(5)
        assert clone.next() == SEED1_OUTPUTS[0]

    def test_repr(self):
        assert repr(CoreGenerator.from_state(1, 2)) == (
            "CoreGenerator(s0=0x0000000000000001, s1=0x0000000000000002)"
        )
