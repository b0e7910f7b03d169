"""Tests for the byte extractor."""

import numpy as np
import pytest

from noise_seed.conditioning import condition
from noise_seed.errors import InsufficientSamples, InvalidParameter
from noise_seed.extractor import extract_random_bytes, stride_for

EPS = 2.0 ** -23  # float32 ulp at 1.0


def _conditioned(n=1000, seed=42):
    rng = np.random.default_rng(seed)
    s = rng.normal(0.05, 0.01, n).astype(np.float32)
    condition(s)
    return s


class TestExtract:
    def test_deterministic(self):
        s = _conditioned()
        assert extract_random_bytes(s, 8, 32) == extract_random_bytes(s.copy(), 8, 32)

    @pytest.mark.parametrize("length", [1, 5, 32, 999])
    def test_exact_length(self, length):
        out = extract_random_bytes(_conditioned(), 8, length)
        assert isinstance(out, bytes)
        assert len(out) == length

    @pytest.mark.parametrize("num_lsb", [1, 3, 7])
    def test_high_bits_masked(self, num_lsb):
        out = extract_random_bytes(_conditioned(), num_lsb, 200)
        assert all(b >> num_lsb == 0 for b in out)

    def test_low_mantissa_bits(self):
        # 1 + 5 ulp has bit pattern 0x3F800005
        s = np.array([0.0, 1.0 + 5 * EPS], dtype=np.float32)
        assert extract_random_bytes(s, 8, 1) == b"\x05"
        assert extract_random_bytes(s, 2, 1) == b"\x01"

    def test_sign_bit_discarded(self):
        s = np.array([1.0 + 0xC3 * EPS, 0.0], dtype=np.float32)
        assert extract_random_bytes(s, 8, 1) == b"\xc3"

    def test_strided_indices(self):
        # n=7, length=3 -> stride 2, visits indices 1, 3, 5
        s = np.zeros(7, dtype=np.float32)
        s[1] = 1.0 + 1 * EPS
        s[3] = 1.0 + 2 * EPS
        s[5] = 1.0 + 3 * EPS
        assert extract_random_bytes(s, 8, 3) == b"\x01\x02\x03"

    def test_does_not_modify_input(self):
        s = _conditioned()
        before = s.copy()
        extract_random_bytes(s, 8, 16)
        np.testing.assert_array_equal(s, before)


class TestBoundaries:
    def test_stride(self):
        assert stride_for(100, 5) == 19
        assert stride_for(11, 10) == 1
        assert stride_for(11, 11) == 0

    def test_length_equal_to_n_minus_one(self):
        s = _conditioned(n=11)
        out = extract_random_bytes(s, 8, 10)
        assert len(out) == 10

    def test_length_too_large(self):
        with pytest.raises(InsufficientSamples):
            extract_random_bytes(_conditioned(n=11), 8, 11)

    def test_single_sample(self):
        with pytest.raises(InsufficientSamples):
            extract_random_bytes(np.array([0.5], dtype=np.float32), 8, 1)

    @pytest.mark.parametrize("num_lsb", [0, 9, -1])
    def test_bad_num_lsb(self, num_lsb):
        with pytest.raises(InvalidParameter):
            extract_random_bytes(_conditioned(), num_lsb, 5)

    @pytest.mark.parametrize("length", [0, -3])
    def test_bad_output_length(self, length):
        with pytest.raises(InvalidParameter):
            extract_random_bytes(_conditioned(), 8, length)
