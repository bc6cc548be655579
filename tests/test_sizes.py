"""Tests for ad unit size resolution and value formatting."""

import pytest

from src.vlyby.models.ad_unit import AdUnit
from src.vlyby.utils.formatting import number_to_string, truncate_price
from src.vlyby.utils.sizes import (
    collect_media_type_sizes,
    format_size,
    is_size_pair,
    resolve_sizes,
    summarize_sizes,
)


class TestResolveSizes:
    """Test suite for resolve_sizes."""

    def test_banner_sizes_only(self):
        """Each banner pair becomes one 'w,h' entry."""
        ad_unit = AdUnit.from_dict({
            "mediaTypes": {"banner": {"sizes": [[300, 250], [728, 90], [320, 50]]}},
        })

        result = resolve_sizes(ad_unit)

        assert result == ["300,250", "728,90", "320,50"]

    def test_banner_and_video_are_concatenated(self):
        """Banner sizes, video sizes and video player size are all kept."""
        ad_unit = AdUnit.from_dict({
            "mediaTypes": {
                "banner": {"sizes": [[300, 250]]},
                "video": {"sizes": [[400, 300]], "playerSize": [640, 480]},
            },
        })

        assert resolve_sizes(ad_unit) == ["300,250", "400,300", "640,480"]

    def test_player_size_list_of_pairs_is_flattened(self):
        """A list of pairs is flattened one level."""
        ad_unit = AdUnit.from_dict({
            "mediaTypes": {"video": {"playerSize": [[640, 480], [1280, 720]]}},
        })

        assert resolve_sizes(ad_unit) == ["640,480", "1280,720"]

    def test_single_pair_banner_sizes(self):
        """A bare [w, h] pair under banner counts as one size."""
        ad_unit = AdUnit.from_dict({"mediaTypes": {"banner": {"sizes": [300, 250]}}})

        assert resolve_sizes(ad_unit) == ["300,250"]

    def test_falls_back_to_top_level_sizes(self):
        """Without per-media-type sizes the top-level field is used."""
        ad_unit = AdUnit.from_dict({
            "sizes": [[300, 250], [300, 600]],
            "mediaTypes": {"banner": {}},
        })

        assert resolve_sizes(ad_unit) == ["300,250", "300,600"]

    def test_top_level_flat_pair(self):
        """Top-level sizes given as a single flat pair."""
        ad_unit = AdUnit.from_dict({"sizes": [300, 250]})

        assert resolve_sizes(ad_unit) == ["300,250"]

    def test_top_level_size_strings(self):
        """Size strings are re-rendered with the requested separator."""
        ad_unit = AdUnit.from_dict({"sizes": ["300x250", "728x90"]})

        assert resolve_sizes(ad_unit) == ["300,250", "728,90"]
        assert resolve_sizes(ad_unit, separator="x") == ["300x250", "728x90"]

    def test_media_type_size_strings_are_separate_entries(self):
        """A list of size strings is never mistaken for one pair."""
        ad_unit = AdUnit.from_dict({
            "mediaTypes": {"banner": {"sizes": ["300x250", "728x90"]}},
        })

        assert resolve_sizes(ad_unit) == ["300,250", "728,90"]

    def test_per_media_type_sizes_win_over_top_level(self):
        """Top-level sizes are ignored when a media type declares sizes."""
        ad_unit = AdUnit.from_dict({
            "sizes": [[970, 250]],
            "mediaTypes": {"banner": {"sizes": [[300, 250]]}},
        })

        assert resolve_sizes(ad_unit) == ["300,250"]

    def test_request_separator(self):
        """Bid requests use the 'WxH' form."""
        ad_unit = AdUnit.from_dict({"mediaTypes": {"banner": {"sizes": [[300, 250]]}}})

        assert resolve_sizes(ad_unit, separator="x") == ["300x250"]

    def test_empty_ad_unit(self):
        """No size information anywhere yields an empty list."""
        assert resolve_sizes(AdUnit()) == []
        assert resolve_sizes(AdUnit.from_dict({})) == []
        assert resolve_sizes(AdUnit.from_dict({"mediaTypes": {"native": {}}})) == []

    def test_output_length_matches_pair_count(self):
        """Output length equals the number of banner pairs."""
        pairs = [[w, w // 2] for w in range(100, 1100, 100)]
        ad_unit = AdUnit.from_dict({"mediaTypes": {"banner": {"sizes": pairs}}})

        result = resolve_sizes(ad_unit)

        assert len(result) == len(pairs)
        assert all(entry == f"{w},{h}" for entry, (w, h) in zip(result, pairs))


class TestSizeHelpers:
    """Tests for the lower-level size helpers."""

    def test_collect_returns_none_without_media_type_sizes(self):
        ad_unit = AdUnit.from_dict({"sizes": [[300, 250]], "mediaTypes": {"banner": {}}})
        assert collect_media_type_sizes(ad_unit) is None

    def test_is_size_pair(self):
        assert is_size_pair([300, 250]) is True
        assert is_size_pair((300, 250)) is True
        assert is_size_pair([[300, 250], [728, 90]]) is False
        assert is_size_pair("300x250") is False
        assert is_size_pair(["300x250", "728x90"]) is False
        assert is_size_pair(["300", "250"]) is True
        assert is_size_pair([True, 250]) is False

    def test_format_size(self):
        assert format_size([300, 250]) == "300,250"
        assert format_size([300.0, 250], "x") == "300x250"
        assert format_size("fluid") == "fluid"
        assert format_size(None) is None

    def test_summarize_sizes(self):
        """All sizes of an ad unit joined as one display string."""
        ad_unit = AdUnit.from_dict({"sizes": [[300, 250], [728, 90]]})
        assert summarize_sizes(ad_unit) == "300,250,728,90"
        assert summarize_sizes(AdUnit()) == ""


class TestPriceFormatting:
    """Tests for price display truncation."""

    @pytest.mark.parametrize(
        "price,expected",
        [
            (12.345, "12.3"),
            (5, "5"),
            (5.0, "5"),
            (0.999, "0.99"),
            (1234.5, "1234"),
            ("2.5678", "2.56"),
            (None, ""),
            (1e-7, "1e-7"),
        ],
    )
    def test_truncate_price(self, price, expected):
        """Truncation keeps at most four characters and never rounds."""
        assert truncate_price(price) == expected

    def test_number_to_string(self):
        assert number_to_string(10.0) == "10"
        assert number_to_string(1.45) == "1.45"
        assert number_to_string(None) == ""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (1e-7, "1e-7"),
            (1.5e-10, "1.5e-10"),
            (0.000001, "0.000001"),
            (1e20, "100000000000000000000"),
            (1e21, "1e+21"),
            (-2.5, "-2.5"),
            (0.0, "0"),
        ],
    )
    def test_browser_float_notation(self, value, expected):
        """Floats render the way the browser prints numbers."""
        assert number_to_string(value) == expected
