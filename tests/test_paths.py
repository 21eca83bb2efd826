"""Tests for path normalization and casing helpers."""

from nitrado_extractor.converter.paths import (
    capitalize_first,
    extract_path_parameters,
    normalize_path,
    pascal_segments,
    split_path,
    to_pascal_case,
)


class TestNormalizePath:
    """Test the normalize_path function."""

    def test_converts_colon_params(self):
        """Test :param markers become {param}."""
        path, names = normalize_path("/domain/:domain/service")

        assert path == "/domain/{domain}/service"
        assert names == ["domain"]

    def test_preserves_underscores(self):
        """Test parameter names are not re-cased."""
        path, names = normalize_path("/:a/:b_c")

        assert path == "/{a}/{b_c}"
        assert names == ["a", "b_c"]

    def test_multiple_params_in_order(self):
        """Test parameter names keep their URL order."""
        _, names = normalize_path("/services/:service_id/gameservers/:id")

        assert names == ["service_id", "id"]

    def test_no_params(self):
        """Test paths without markers are unchanged."""
        assert normalize_path("/company/stats") == ("/company/stats", [])


class TestExtractPathParameters:
    """Test the extract_path_parameters function."""

    def test_extracts_brace_names(self):
        """Test names are read from a normalized path."""
        assert extract_path_parameters("/services/{id}/users/{user_id}") == ["id", "user_id"]

    def test_empty_for_plain_path(self):
        """Test an empty list when there are no parameters."""
        assert extract_path_parameters("/company/stats") == []


class TestCasing:
    """Test the casing helpers."""

    def test_to_pascal_case_snake(self):
        """Test snake_case becomes PascalCase."""
        assert to_pascal_case("service_id") == "ServiceId"

    def test_to_pascal_case_keeps_capitalized_group(self):
        """Test an underscore before an uppercase letter is kept."""
        assert to_pascal_case("Game_Minecraft") == "Game_Minecraft"

    def test_to_pascal_case_keeps_uppercase_after_underscore(self):
        """Test only lowercase letters after an underscore are merged."""
        assert to_pascal_case("ab_Cd") == "Ab_Cd"

    def test_capitalize_first(self):
        """Test only the first letter changes."""
        assert capitalize_first("getStats") == "GetStats"
        assert capitalize_first("1abc") == "1abc"
        assert capitalize_first("") == ""

    def test_split_path_drops_empty_segments(self):
        """Test leading, trailing and doubled slashes are ignored."""
        assert split_path("//company//stats/") == ["company", "stats"]

    def test_pascal_segments_handles_both_markers(self):
        """Test :param and {param} segments are cased from their names."""
        assert pascal_segments("/services/:service_id/users/{user_id}") == [
            "Services",
            "ServiceId",
            "Users",
            "UserId",
        ]
