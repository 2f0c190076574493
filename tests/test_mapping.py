import numpy as np
from chanquant.quantization.histogram import channel_histograms
from chanquant.quantization.mapping import (
    apply_luts, nearest_center, nearest_center_lut, project_index, projection_lut
)

def test_nearest_center_picks_closest():
    assert nearest_center(0, [10, 100, 200]) == 10
    assert nearest_center(140, [10, 100, 200]) == 100
    assert nearest_center(255, [10, 100, 200]) == 200

def test_nearest_center_tie_goes_to_first():
    assert nearest_center(128, [120, 136]) == 120
    assert nearest_center(50, [50, 50]) == 50

def test_nearest_center_lut_matches_scalar():
    centers = np.array([3, 40, 41, 128, 250])
    lut = nearest_center_lut(centers)
    assert lut.shape == (256,) and lut.dtype == np.uint8
    assert lut.tolist() == [nearest_center(v, centers.tolist()) for v in range(256)]

def test_project_index_clamps():
    assert project_index(0, 4) == 0
    assert project_index(63, 4) == 0
    assert project_index(64, 4) == 1
    assert project_index(255, 4) == 3
    assert project_index(255, 1) == 0

def test_projection_lut_ignores_center_values():
    centers = np.array([0, 17, 51, 255])
    lut = projection_lut(centers)
    assert lut[100] == 17  # nearest would be 51
    assert nearest_center_lut(centers)[100] == 51
    assert lut.tolist() == [int(centers[project_index(v, 4)]) for v in range(256)]

def test_apply_luts_per_channel():
    img = np.array([[[0, 128, 255], [10, 20, 30]]], dtype=np.uint8)
    luts = (
        np.full(256, 1, dtype=np.uint8),
        np.arange(256, dtype=np.uint8),
        np.arange(256)[::-1].astype(np.uint8),
    )
    out = apply_luts(img, luts)
    assert out.tolist() == [[[1, 128, 0], [1, 20, 225]]]
    assert out is not img

def test_channel_histograms():
    rng = np.random.default_rng(0)
    img = rng.integers(0, 256, size=(20, 30, 3), dtype=np.uint8)
    hists = channel_histograms(img)
    assert len(hists) == 3
    for ch, h in enumerate(hists):
        assert h.shape == (256,)
        assert h.sum() == 20 * 30
        np.testing.assert_array_equal(h, np.bincount(img[..., ch].ravel(), minlength=256))
    hists[0][:] = 0
    assert hists[1].sum() == 20 * 30

def test_channel_histograms_constant_image():
    img = np.zeros((4, 5, 3), dtype=np.uint8)
    img[...] = (7, 8, 9)
    r, g, b = channel_histograms(img)
    assert r[7] == 20 and g[8] == 20 and b[9] == 20
    assert r.sum() == g.sum() == b.sum() == 20
