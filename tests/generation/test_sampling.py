"""
Tests for temperature-scaled sampling.
"""
from collections import Counter

import pytest
import torch

from acrostic.generation.sampling import sample


@pytest.fixture
def probs():
    return torch.tensor([0.1, 0.6, 0.3])


def test_sample_returns_index_in_range(probs):
    generator = torch.Generator().manual_seed(0)
    for _ in range(200):
        index = sample(probs, 1.0, generator=generator)
        assert isinstance(index, int)
        assert 0 <= index < probs.numel()


def test_sample_low_temperature_converges_to_argmax(probs):
    generator = torch.Generator().manual_seed(1)
    draws = [sample(probs, 0.01, generator=generator) for _ in range(200)]
    assert set(draws) == {1}


@pytest.mark.parametrize("temperature", [0.0, -1.0])
def test_sample_non_positive_temperature_is_clamped(probs, temperature):
    generator = torch.Generator().manual_seed(2)
    draws = [sample(probs, temperature, generator=generator) for _ in range(50)]
    assert set(draws) == {1}


def test_sample_never_selects_zero_probability_entries():
    probs = torch.tensor([0.0, 0.5, 0.0, 0.5, 0.0])
    generator = torch.Generator().manual_seed(3)
    draws = Counter(sample(probs, 1.0, generator=generator) for _ in range(500))
    assert set(draws) <= {1, 3}
    # Both non-zero entries should show up with equal weights
    assert draws[1] > 0 and draws[3] > 0


def test_sample_temperature_one_follows_distribution(probs):
    generator = torch.Generator().manual_seed(4)
    n = 4000
    draws = Counter(sample(probs, 1.0, generator=generator) for _ in range(n))
    for index, p in enumerate(probs.tolist()):
        assert abs(draws[index] / n - p) < 0.05


def test_sample_high_temperature_flattens_distribution():
    probs = torch.tensor([0.9, 0.1])
    generator = torch.Generator().manual_seed(5)
    n = 2000
    sharp = Counter(sample(probs, 0.5, generator=generator) for _ in range(n))
    flat = Counter(sample(probs, 1.0, generator=generator) for _ in range(n))
    assert flat[1] > sharp[1]


def test_sample_accepts_unnormalized_scores():
    # Scale does not matter once the logits are treated as unnormalized
    generator = torch.Generator().manual_seed(6)
    draws = [sample(torch.tensor([0.0, 7.0, 0.0]), 1.0, generator=generator) for _ in range(20)]
    assert set(draws) == {1}


def test_sample_accepts_python_sequence():
    generator = torch.Generator().manual_seed(7)
    assert sample([0.0, 0.0, 1.0], 0.5, generator=generator) == 2


def test_sample_is_reproducible_with_seeded_generator(probs):
    gen_a = torch.Generator().manual_seed(42)
    gen_b = torch.Generator().manual_seed(42)
    first = [sample(probs, 1.0, generator=gen_a) for _ in range(20)]
    second = [sample(probs, 1.0, generator=gen_b) for _ in range(20)]
    assert first == second
