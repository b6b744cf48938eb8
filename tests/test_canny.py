import logging

import numpy as np
import pytest

from edgekit.canny import CannyConfig, CannyEdgeDetector, CannyResult, canny_edge
from edgekit.errors import ShapeMismatchError
from edgekit.filter import BorderType, REFLECT, REPLICATE


def test_step_edge_marks_crest_and_clamped_neighbour(step_image):
    edges = canny_edge(step_image, 0.05, 0.05, REPLICATE)
    # col 9 survives suppression against col 8, which was already clamped to 1
    expected = np.zeros_like(step_image)
    expected[:, 8:10] = 1.0
    assert np.array_equal(edges, expected)


def test_output_is_binary(rng):
    img = rng.random((32, 31))
    edges = canny_edge(img, 0.3, 0.1, REFLECT)
    assert edges.shape == img.shape
    assert set(np.unique(edges)) <= {0.0, 1.0}


def test_constant_image_has_no_edges():
    edges = canny_edge(np.full((10, 12), 0.5), 0.5, 0.05, REFLECT)
    assert np.all(edges == 0.0)


def test_writes_into_out_buffer(step_image):
    out = np.empty_like(step_image)
    result = canny_edge(step_image, 0.05, 0.05, REPLICATE, out)
    assert result is out
    assert np.array_equal(out, canny_edge(step_image, 0.05, 0.05, REPLICATE))


def test_out_shape_mismatch(step_image):
    with pytest.raises(ShapeMismatchError):
        canny_edge(step_image, 0.05, 0.05, REFLECT, np.zeros((4, 4)))


def test_does_not_modify_source(step_image):
    before = step_image.copy()
    canny_edge(step_image, 0.5, 0.05, BorderType.constant(0.0))
    assert np.array_equal(step_image, before)


def test_full_connectivity_finds_at_least_as_many_edges(rng):
    img = rng.random((24, 24))
    up_left = canny_edge(img, 0.3, 0.2, REFLECT)
    full = canny_edge(img, 0.3, 0.2, REFLECT, full_connectivity=True)
    assert np.all(full[up_left == 1.0] == 1.0)


def test_detector_matches_function(step_image):
    config = CannyConfig(max_val_percent=0.05, min_val_percent=0.05, border="replicate")
    result = CannyEdgeDetector(config).detect_edges(step_image)

    assert isinstance(result, CannyResult)
    assert result.config is config
    assert np.array_equal(result.edges, canny_edge(step_image, 0.05, 0.05, REPLICATE))
    assert result.low_threshold == pytest.approx(0.01)
    assert result.high_threshold == pytest.approx(0.99)
    assert result.get_edge_pixel_count() == 32
    assert result.get_edge_ratio() == pytest.approx(32 / 256)
    assert "32 pixels" in str(result)


def test_detector_defaults():
    detector = CannyEdgeDetector()
    assert detector.config == CannyConfig()
    assert detector.config.border == REFLECT


def test_detector_rejects_color_input():
    with pytest.raises(ValueError):
        CannyEdgeDetector().detect_edges(np.zeros((4, 4, 3)))


def test_detector_out_buffer(step_image):
    out = np.zeros_like(step_image)
    result = CannyEdgeDetector(CannyConfig(0.05, 0.05, REPLICATE)).detect_edges(step_image, out)
    assert result.edges is out


@pytest.mark.parametrize("kwargs", [
    {"max_val_percent": 0.0},
    {"max_val_percent": 1.5},
    {"min_val_percent": -0.1},
    {"min_val_percent": 1.0},
    {"max_val_percent": 0.8, "min_val_percent": 0.5},
    {"histogram_bins": 1},
])
def test_config_validation(kwargs):
    with pytest.raises(ValueError):
        CannyConfig(**kwargs)


def test_config_parses_border_names():
    assert CannyConfig(border="replicate").border == REPLICATE
    with pytest.raises(ValueError):
        CannyConfig(border="wrap")


def test_config_dict_round_trip():
    config = CannyConfig(
        max_val_percent=0.3,
        min_val_percent=0.2,
        border=BorderType.constant(0.25),
        histogram_bins=64,
        full_connectivity=True,
    )
    data = config.to_dict()
    assert data["border"] == "constant"
    assert data["border_value"] == 0.25
    assert CannyConfig.from_dict(data) == config


def test_config_from_partial_dict():
    config = CannyConfig.from_dict({"max_val_percent": 0.2})
    assert config.max_val_percent == 0.2
    assert config.border == REFLECT


def test_empty_result_ratio():
    result = CannyResult(edges=np.zeros((0, 0)), low_threshold=0.0, high_threshold=1.0)
    assert result.get_edge_ratio() == 0.0


def test_thresholds_are_logged_at_debug(step_image, caplog):
    with caplog.at_level(logging.DEBUG, logger="edgekit"):
        canny_edge(step_image, 0.05, 0.05, REPLICATE)
    assert "Estimated thresholds low=0.010 high=0.990" in caplog.text
