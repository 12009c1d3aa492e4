"""
Tests for icon assembly: option resolution, draw order, determinism.
"""

from unittest.mock import patch

import numpy as np
import pytest

from blockicon.assemble import IconBuilder, build_icon, resolve_dimensions
from blockicon.bitmap import build_bitmap, is_mirrored
from blockicon.colors import pick_color
from blockicon.config import IconDefaults
from blockicon.models import IconOptions
from blockicon.render import rasterize
from blockicon.rng import SeededRNG
from blockicon.seeds import SeedSourceError

ADDRESS = "0xfb6916095ca1df60bb79ce92ce3ea74c37c5d359"


class TestResolveDimensions:

    def test_defaults(self):
        assert resolve_dimensions(IconOptions()) == (8, 4)

    def test_custom_defaults(self):
        assert resolve_dimensions(IconOptions(), IconDefaults(size=5, scale=2)) == (5, 2)

    def test_explicit_values_win(self):
        assert resolve_dimensions(IconOptions(size=3, scale=10)) == (3, 10)

    @pytest.mark.parametrize("size,scale", [(0, 4), (-1, 4), (8, 0), (8, -2), ("8", 4), (8, 1.5), (True, 4)])
    def test_invalid(self, size, scale):
        with pytest.raises(ValueError):
            resolve_dimensions(IconOptions(size=size, scale=scale))


class TestDeterminism:

    def test_same_seed_same_icon(self):
        a = build_icon(seed=ADDRESS)
        b = build_icon(seed=ADDRESS)
        assert a.same_image(b)
        assert np.array_equal(a.grid, b.grid)
        assert (a.color, a.bg_color, a.spot_color) == (b.color, b.bg_color, b.spot_color)

    def test_same_seed_explicit_colors(self):
        opts = IconOptions(seed="alice", size=11, scale=2, color="red", bg_color="white", spot_color="blue")
        assert build_icon(opts).same_image(build_icon(opts))

    def test_different_seeds_differ(self):
        a = build_icon(seed="alice")
        b = build_icon(seed="bob")
        assert not np.array_equal(a.grid, b.grid) or a.color != b.color

    def test_grid_is_mirrored(self):
        for size in range(1, 12):
            assert is_mirrored(build_icon(seed=ADDRESS, size=size).grid)


class TestConsumptionOrder:

    def test_all_generated_uses_eighteen_color_draws(self):
        builder = IconBuilder(IconOptions(seed=ADDRESS))
        builder.build()
        assert builder.report.color_draws == 18
        assert builder.report.bitmap_draws == 8 * 4

    @pytest.mark.parametrize("supplied,expected", [
        ({"color": "red"}, 12),
        ({"bg_color": "red"}, 12),
        ({"color": "red", "spot_color": "blue"}, 6),
        ({"color": "red", "bg_color": "white", "spot_color": "blue"}, 0),
    ])
    def test_supplied_colors_skip_draws(self, supplied, expected):
        builder = IconBuilder(IconOptions(seed=ADDRESS, **supplied))
        builder.build()
        assert builder.report.color_draws == expected

    def test_matches_manual_pipeline(self):
        rng = SeededRNG(ADDRESS)
        color = pick_color(rng)
        bg_color = pick_color(rng)
        spot_color = pick_color(rng)
        grid = build_bitmap(rng, 8)

        icon = build_icon(seed=ADDRESS)
        assert (icon.color, icon.bg_color, icon.spot_color) == (color, bg_color, spot_color)
        assert np.array_equal(icon.grid, grid)

    def test_remaining_colors_keep_order(self):
        """Supplying color shifts bg_color onto the draws color would have used."""
        full = build_icon(seed=ADDRESS)
        partial = build_icon(seed=ADDRESS, color="red")
        assert partial.color == "red"
        assert partial.bg_color == full.color
        assert partial.spot_color == full.bg_color

    def test_explicit_colors_bitmap_starts_after_seed(self):
        icon = build_icon(seed=ADDRESS, color="red", bg_color="white", spot_color="blue")
        assert np.array_equal(icon.grid, build_bitmap(SeededRNG(ADDRESS), 8))

    def test_empty_color_counts_as_unspecified(self):
        assert build_icon(seed=ADDRESS, color="").color == build_icon(seed=ADDRESS).color


class TestScenarios:

    def test_empty_seed_size_two(self):
        icon = build_icon(seed="", size=2, color="red", bg_color="white", spot_color="blue")
        assert icon.grid.tolist() == [[0, 0], [0, 0]]
        pixels = rasterize(icon)
        assert pixels.shape == (8, 8, 3)
        assert np.all(pixels == 255)

    def test_empty_seed_generated_colors(self):
        icon = build_icon(seed="")
        assert icon.color == icon.bg_color == icon.spot_color == "hsl(0,40%,0%)"
        assert not icon.seed_generated

    def test_size_one(self):
        builder = IconBuilder(IconOptions(seed="alice", size=1))
        icon = builder.build()
        assert icon.grid.shape == (1, 1)
        assert icon.data_width == 1
        assert icon.mirror_width == 0
        assert builder.report.bitmap_draws == 1

    def test_defaults_applied(self):
        icon = build_icon(seed="alice")
        assert icon.size == 8
        assert icon.scale == 4
        assert icon.pixel_size == 32

    def test_custom_defaults(self):
        icon = build_icon(seed="alice", defaults=IconDefaults(size=6, scale=3))
        assert icon.pixel_size == 18


class TestSeedSynthesis:

    def test_missing_seed_is_generated(self):
        with patch("blockicon.seeds.secrets.randbelow", return_value=255):
            icon = build_icon()
        assert icon.seed == "ff"
        assert icon.seed_generated
        assert icon.same_image(build_icon(seed="ff"))

    def test_generated_seed_is_hex(self):
        icon = build_icon()
        int(icon.seed, 16)
        assert icon.seed_generated

    def test_entropy_failure_surfaces(self):
        with patch("blockicon.seeds.secrets.randbelow", side_effect=NotImplementedError("no urandom")):
            with pytest.raises(SeedSourceError):
                build_icon()

    def test_non_string_seed(self):
        with pytest.raises(TypeError):
            build_icon(seed=1234)


class TestBuildIconArguments:

    def test_options_and_kwargs_conflict(self):
        with pytest.raises(TypeError):
            build_icon(IconOptions(seed="a"), seed="b")

    def test_unknown_option(self):
        with pytest.raises(TypeError):
            build_icon(seed="a", colour="red")

    def test_builders_are_isolated(self):
        """Two builders never share generator state."""
        a = IconBuilder(IconOptions(seed="alice"))
        b = IconBuilder(IconOptions(seed="alice"))
        assert a.rng is not b.rng
        assert a.build().same_image(b.build())


class TestReferenceVectors:
    """Known answers produced by the reference JavaScript generator."""

    def test_address_seed(self):
        icon = build_icon(seed=ADDRESS)
        assert icon.color == "hsl(40,95.56087048724294%,53.07253532810137%)"
        assert icon.bg_color == "hsl(62,84.17102983221412%,56.51313749840483%)"
        assert icon.spot_color == "hsl(244,90.81825148314238%,69.22265975736082%)"
        assert icon.grid.tolist() == [
            [1, 0, 0, 0, 0, 0, 0, 1],
            [0, 0, 0, 0, 0, 0, 0, 0],
            [1, 1, 0, 0, 0, 0, 1, 1],
            [1, 2, 1, 1, 1, 1, 2, 1],
            [0, 1, 0, 1, 1, 0, 1, 0],
            [0, 2, 1, 2, 2, 1, 2, 0],
            [0, 2, 0, 0, 0, 0, 2, 0],
            [1, 0, 2, 1, 1, 2, 0, 1],
        ]

    def test_short_seed_odd_size(self):
        icon = build_icon(seed="alice", size=5)
        assert icon.color == "hsl(1,40.179775366559625%,7.525860657915473%)"
        assert icon.bg_color == "hsl(45,41.70377979055047%,12.296741595491767%)"
        assert icon.spot_color == "hsl(357,97.91715880855918%,39.28293458884582%)"
        assert icon.grid.tolist() == [
            [1, 0, 1, 0, 1],
            [2, 0, 1, 0, 2],
            [1, 2, 0, 2, 1],
            [1, 1, 1, 1, 1],
            [1, 1, 2, 1, 1],
        ]
