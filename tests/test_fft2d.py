import numpy as np
import pytest

from alifesim.fft2d import FFT2D


@pytest.mark.parametrize("shape", [(0, 3), (3, 0), (-1, 2)])
def test_rejects_empty_dimensions(shape):
    with pytest.raises(ValueError, match="nonzero"):
        FFT2D(*shape)


def test_size_and_shape():
    fft = FFT2D(4, 6)
    assert (fft.rows, fft.cols, fft.size) == (4, 6, 24)
    assert fft.forward(np.zeros(24)).shape == (4, 6)


def test_round_trip_is_scaled_by_size():
    rng = np.random.default_rng(5)
    data = rng.random((5, 7))
    fft = FFT2D(5, 7)
    restored = fft.inverse(fft.forward(data))
    assert np.allclose(restored.real, data * fft.size)
    assert np.allclose(restored.imag, 0.0)


def test_flat_and_shaped_inputs_agree():
    rng = np.random.default_rng(2)
    data = rng.random((3, 4))
    fft = FFT2D(3, 4)
    assert np.allclose(fft.forward(data), fft.forward(data.ravel()))


def test_delta_at_origin_has_flat_spectrum():
    fft = FFT2D(4, 4)
    delta = np.zeros((4, 4))
    delta[0, 0] = 1.0
    assert np.allclose(fft.forward(delta), 1.0)


def test_constant_input_concentrates_in_dc():
    fft = FFT2D(3, 5)
    spectrum = fft.forward(np.full((3, 5), 2.0))
    assert spectrum[0, 0] == pytest.approx(2.0 * fft.size)
    rest = spectrum.copy()
    rest[0, 0] = 0.0
    assert np.allclose(rest, 0.0)


def test_wrong_input_size():
    fft = FFT2D(2, 2)
    with pytest.raises(ValueError):
        fft.forward(np.zeros(5))
    with pytest.raises(ValueError):
        fft.inverse(np.zeros(3))


def test_index_matches_row_major_layout():
    fft = FFT2D(3, 5)
    layout = np.arange(fft.size).reshape(3, 5)
    assert all(fft.index(r, c) == layout[r, c] for r in range(3) for c in range(5))