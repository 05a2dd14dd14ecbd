import pytest

from shared.validators import parse_string_list


class TestParseStringList:
    def test_json_array_string(self):
        result = parse_string_list('["Pikachu","Eevee"]')
        assert result == ["Pikachu", "Eevee"]

    def test_json_array_items_are_stripped(self):
        result = parse_string_list('[" Pikachu ", "", "Eevee"]')
        assert result == ["Pikachu", "Eevee"]

    def test_comma_separated_string(self):
        result = parse_string_list("Pikachu,Eevee")
        assert result == ["Pikachu", "Eevee"]

    def test_comma_separated_with_whitespace(self):
        result = parse_string_list("Pikachu , Mr. Mime")
        assert result == ["Pikachu", "Mr. Mime"]

    def test_passthrough_list(self):
        names = ["Pikachu", "Eevee"]
        result = parse_string_list(names)
        assert result == names

    def test_list_drops_blank_items(self):
        assert parse_string_list(["Pikachu", "  ", "Snorlax "]) == ["Pikachu", "Snorlax"]

    def test_empty_string_raises(self):
        with pytest.raises(ValueError, match="must not be empty"):
            parse_string_list("")

    def test_whitespace_string_raises(self):
        with pytest.raises(ValueError, match="must not be empty"):
            parse_string_list("   ")

    def test_invalid_json_raises(self):
        with pytest.raises(ValueError, match="Invalid JSON array"):
            parse_string_list("[not valid json")

    def test_json_mixed_types_array_raises(self):
        with pytest.raises(ValueError, match="must be an array of strings"):
            parse_string_list('["Pikachu", 123]')

    def test_json_empty_array_raises(self):
        with pytest.raises(ValueError, match="must not be empty"):
            parse_string_list("[]")

    def test_empty_list_raises(self):
        with pytest.raises(ValueError, match="must not be empty"):
            parse_string_list([])

    def test_empty_list_allowed(self):
        assert parse_string_list([], allow_empty=True) == []
        assert parse_string_list(",,", allow_empty=True) == []

    def test_comma_separated_skips_empty_segments(self):
        result = parse_string_list("Pikachu,,Eevee,")
        assert result == ["Pikachu", "Eevee"]

    def test_comma_only_raises(self):
        with pytest.raises(ValueError, match="must not be empty"):
            parse_string_list(",")
