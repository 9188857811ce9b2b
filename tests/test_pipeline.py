"""
Tests for the operation pipeline
"""

import pytest

from imageops.config import get_settings
from imageops.core.color_matrix import ColorMatrix, invert
from imageops.core.enums import Interpolation
from imageops.core.exceptions import InvalidParameter
from imageops.core.image import Image
from imageops.pipeline import apply_operation, parse_operations, run_pipeline
from imageops.schemas import (
    CropParams,
    FilterParams,
    MaskParams,
    MatrixParams,
    ResizeToWidthParams,
    RoundedRectMask,
    ScaleParams,
)
from imageops.transforms import (
    apply_matrix,
    crop_to_ratio,
    mask_circle,
    mask_rounded_rect,
    resize_to_width,
    scale,
)


class TestParseOperations:
    """Test operation validation"""

    def test_parse_all_kinds(self):
        """Test that every op kind is recognised"""
        ops = parse_operations(
            [
                {"op": "crop", "ratio_w": 16, "ratio_h": 9},
                {"op": "filter", "preset": "grayscale"},
                {"op": "matrix", "matrix": ColorMatrix.identity().to_list()},
                {"op": "scale", "factor": 0.5},
                {"op": "resize_to_width", "target_width": 400, "interpolation": "area"},
                {"op": "mask", "mask": {"shape": "rounded_rect", "corner_radius": 5}},
                {"op": "mask"},
            ]
        )

        assert [type(op) for op in ops] == [
            CropParams,
            FilterParams,
            MatrixParams,
            ScaleParams,
            ResizeToWidthParams,
            MaskParams,
            MaskParams,
        ]
        assert ops[5].mask == RoundedRectMask(corner_radius=5)
        assert ops[6].mask.shape == "circle"

    @pytest.mark.parametrize(
        "payload",
        [
            {"op": "crop", "ratio_w": 0, "ratio_h": 1},
            {"op": "scale", "factor": -1},
            {"op": "resize_to_width", "target_width": 0},
            {"op": "filter", "preset": "vintage"},
            {"op": "matrix", "matrix": [1.0, 2.0]},
            {"op": "rotate", "degrees": 90},
            {"op": "crop", "ratio_w": 1, "ratio_h": 1, "extra": True},
            {"ratio_w": 1, "ratio_h": 1},
        ],
    )
    def test_invalid_payloads(self, payload):
        """Test that bad payloads raise InvalidParameter"""
        with pytest.raises(InvalidParameter):
            parse_operations([payload])


class TestRunPipeline:
    """Test chaining operations"""

    def test_each_operation_matches_direct_call(self, wide_image):
        """Test dispatch to the engine functions"""
        assert apply_operation(wide_image, CropParams(ratio_w=1, ratio_h=1)) == crop_to_ratio(
            wide_image, 1, 1
        )
        assert apply_operation(wide_image, FilterParams(preset="invert")) == apply_matrix(
            wide_image, invert()
        )
        assert apply_operation(wide_image, ScaleParams(factor=0.5)) == scale(wide_image, 0.5)
        assert apply_operation(
            wide_image, ResizeToWidthParams(target_width=40)
        ) == resize_to_width(wide_image, 40)
        assert apply_operation(wide_image, MaskParams()) == mask_circle(wide_image)
        assert apply_operation(
            wide_image, MaskParams(mask=RoundedRectMask(corner_radius=8))
        ) == mask_rounded_rect(wide_image, 8)
        assert (
            apply_operation(wide_image, MatrixParams(matrix=invert().to_list()))
            == apply_matrix(wide_image, invert())
        )

    def test_chain(self, wide_image):
        """Test crop -> filter -> scale on raw dicts"""
        result = run_pipeline(
            wide_image,
            [
                {"op": "crop", "ratio_w": 1, "ratio_h": 1},
                {"op": "filter", "preset": "invert"},
                {"op": "scale", "factor": 0.5},
            ],
        )

        expected = scale(apply_matrix(crop_to_ratio(wide_image, 1, 1), invert()), 0.5)
        assert result.size == (25, 25)
        assert result == expected

    def test_original_kept_for_reset(self, wide_image):
        """Test that the source image is untouched by a pipeline"""
        before = wide_image.copy()
        run_pipeline(wide_image, [FilterParams(preset="sepia"), MaskParams()])
        assert wide_image == before

    def test_empty_pipeline(self, wide_image):
        """Test that no operations returns the input"""
        assert run_pipeline(wide_image, []) is wide_image

    def test_engine_errors_propagate(self):
        """Test that runtime parameter errors surface"""
        with pytest.raises(InvalidParameter):
            run_pipeline(Image.blank(1, 1), [ScaleParams(factor=0.1)])

    def test_generator_of_models(self, wide_image):
        """Test that a one-shot iterable of models is applied in full"""
        ops = (op for op in [CropParams(ratio_w=1, ratio_h=1), ScaleParams(factor=0.5)])
        assert run_pipeline(wide_image, ops).size == (25, 25)

    def test_generator_of_dicts(self, wide_image):
        """Test that a one-shot iterable of raw dicts is parsed and applied"""
        ops = (d for d in [{"op": "crop", "ratio_w": 1, "ratio_h": 1}])
        assert run_pipeline(wide_image, ops).size == (50, 50)


class TestPipelineSettings:
    """Test that settings fill only the fields an operation leaves unset"""

    @pytest.fixture
    def two_pixels(self):
        return Image.from_rgba(2, 1, [(0, 0, 0, 255), (200, 200, 200, 255)])

    def test_default_interpolation_from_settings(self, monkeypatch, two_pixels):
        """Test IMAGEOPS_RESAMPLE__INTERPOLATION for unset interpolation"""
        monkeypatch.setenv("IMAGEOPS_RESAMPLE__INTERPOLATION", "nearest")
        get_settings.cache_clear()

        result = apply_operation(two_pixels, ScaleParams(factor=4))
        assert result == scale(two_pixels, 4, Interpolation.NEAREST)

    def test_explicit_interpolation_wins(self, monkeypatch, two_pixels):
        """Test that an explicit field overrides settings"""
        monkeypatch.setenv("IMAGEOPS_RESAMPLE__INTERPOLATION", "nearest")
        get_settings.cache_clear()

        result = apply_operation(
            two_pixels, ResizeToWidthParams(target_width=8, interpolation="bilinear")
        )
        assert result == resize_to_width(two_pixels, 8)

    def test_default_antialias_from_settings(self, monkeypatch):
        """Test IMAGEOPS_MASK__ANTIALIAS for unset antialias"""
        image = Image.blank(20, 20, (255, 255, 255, 255))
        monkeypatch.setenv("IMAGEOPS_MASK__ANTIALIAS", "true")
        monkeypatch.setenv("IMAGEOPS_MASK__SUPERSAMPLING", "2")
        get_settings.cache_clear()

        result = apply_operation(image, MaskParams())
        assert result == mask_circle(image, antialias=True, supersampling=2)
        assert apply_operation(image, MaskParams(antialias=False)) == mask_circle(image)
