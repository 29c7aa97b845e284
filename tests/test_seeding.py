import pytest

from isingreset.seeding import SeedSeqFE, auto_seed, seed_seq_fe128, seed_seq_fe256


def test_param_round_trips_four_seeds():
    seeds = [1, 2, 3, 4]
    assert seed_seq_fe128(seeds).param() == seeds


def test_param_round_trips_eight_seeds():
    seeds = [0xDEADBEEF, 17, 0, 99, 123456789, 5, 0xFFFFFFFF, 42]
    assert seed_seq_fe256(seeds).param() == seeds


def test_param_round_trips_with_extra_mix_rounds():
    seeds = [7, 11]
    seq = SeedSeqFE(seeds, count=2)
    assert seq.param() == seeds


def test_param_pads_short_input_with_zeros():
    seq = seed_seq_fe128([0x1234, 0x5678])
    assert seq.param() == [0x1234, 0x5678, 0, 0]


def test_rebuilding_from_param_gives_same_output():
    seq = seed_seq_fe128([10, 20, 30, 40, 50, 60])
    rebuilt = seed_seq_fe128(seq.param())
    assert rebuilt.generate(32) == seq.generate(32)


def test_generate_is_deterministic():
    first = seed_seq_fe128([328575958951598690 & 0xFFFFFFFF, 328575958951598690 >> 32])
    second = seed_seq_fe128([328575958951598690 & 0xFFFFFFFF, 328575958951598690 >> 32])
    assert first.generate(624) == second.generate(624)


def test_generate_prefix_is_stable():
    seq = seed_seq_fe128([5, 6])
    assert seq.generate(10)[:3] == seq.generate(3)


def test_generate_words_are_32_bit():
    words = seed_seq_fe256([1, 2, 3]).generate(100)
    assert len(words) == 100
    assert all(0 <= word <= 0xFFFFFFFF for word in words)


def test_generate_zero_and_negative():
    seq = seed_seq_fe128([1])
    assert seq.generate(0) == []
    with pytest.raises(ValueError):
        seq.generate(-1)


def test_short_input_equals_zero_padded_input():
    assert seed_seq_fe128([9, 8]).generate(16) == seed_seq_fe128([9, 8, 0, 0]).generate(16)


def test_extra_seed_words_change_output():
    base = seed_seq_fe128([1, 2, 3, 4]).generate(8)
    extended = seed_seq_fe128([1, 2, 3, 4, 5]).generate(8)
    assert extended != base


def test_single_bit_change_changes_output():
    a = seed_seq_fe128([0, 0, 0, 0]).generate(8)
    b = seed_seq_fe128([1, 0, 0, 0]).generate(8)
    assert a != b


def test_seeds_are_truncated_to_32_bits():
    assert seed_seq_fe128([-1]).generate(8) == seed_seq_fe128([0xFFFFFFFF]).generate(8)
    assert seed_seq_fe128([1 << 32 | 3]).generate(8) == seed_seq_fe128([3]).generate(8)


def test_stir_returns_self_and_changes_state():
    seq = seed_seq_fe128([1, 2, 3, 4])
    before = seq.generate(8)
    assert seq.stir() is seq
    assert seq.generate(8) != before


def test_reseed_matches_fresh_sequence():
    seq = seed_seq_fe128([1, 2, 3, 4])
    seq.seed([9, 9])
    assert seq.generate(12) == seed_seq_fe128([9, 9]).generate(12)


def test_sizes():
    assert seed_seq_fe128([]).size() == 4
    assert seed_seq_fe256([]).size() == 8
    assert SeedSeqFE([1], count=3).size() == 3


def test_invalid_arguments():
    with pytest.raises(ValueError):
        SeedSeqFE([1], count=0)
    with pytest.raises(ValueError):
        SeedSeqFE([1], count=4, mix_rounds=0)


def test_auto_seed_size_and_range():
    seq = auto_seed(8)
    assert seq.size() == 8
    assert all(0 <= word <= 0xFFFFFFFF for word in seq.generate(20))


def test_auto_seeds_differ():
    outputs = [tuple(auto_seed(4).generate(8)) for _ in range(5)]
    assert all(len(output) == 8 for output in outputs)
    assert len(set(outputs)) == 5