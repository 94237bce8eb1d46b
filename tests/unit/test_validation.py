"""Unit tests for validation utilities."""
import pytest
from src.utils.validation import (
    parse_day_param,
    validate_name,
    validate_session_id,
    validate_session_payload,
    validate_speaker_payload,
)


class TestValidateSessionPayload:
    """Test validate_session_payload function."""

    def test_minimal_payload_is_valid(self):
        assert validate_session_payload({"id": 1}) is True

    def test_full_payload_is_valid(self):
        payload = {
            "id": 3,
            "title": "Async Python",
            "trackId": 2,
            "startTime": "2019-01-01T09:00:00Z",
            "endTime": None,
            "speakers": [{"id": 1, "name": "Ada"}],
        }
        assert validate_session_payload(payload) is True

    def test_non_dict_raises_error(self):
        with pytest.raises(ValueError, match="must be a dictionary"):
            validate_session_payload(["id", 1])

    def test_missing_id_raises_error(self):
        with pytest.raises(ValueError, match="Missing required field: id"):
            validate_session_payload({"title": "No id"})

    @pytest.mark.parametrize("bad_id", ["1", 1.5, None, True])
    def test_non_integer_id_raises_error(self, bad_id):
        with pytest.raises(ValueError, match="Session ID must be an integer"):
            validate_session_payload({"id": bad_id})

    def test_non_integer_track_raises_error(self):
        with pytest.raises(ValueError, match="Track ID must be an integer"):
            validate_session_payload({"id": 1, "trackId": "A"})

    def test_non_string_time_raises_error(self):
        with pytest.raises(ValueError, match="startTime must be an ISO 8601 string"):
            validate_session_payload({"id": 1, "startTime": 1546333200})

    def test_speakers_must_be_list(self):
        with pytest.raises(ValueError, match="Speakers must be a list"):
            validate_session_payload({"id": 1, "speakers": {"id": 1, "name": "Ada"}})


class TestValidateSpeakerPayload:
    """Test validate_speaker_payload function."""

    def test_valid_speaker(self):
        assert validate_speaker_payload({"id": 1, "name": "Ada"}) is True

    def test_missing_name_raises_error(self):
        with pytest.raises(ValueError, match="Missing required speaker field: name"):
            validate_speaker_payload({"id": 1})

    def test_string_id_raises_error(self):
        with pytest.raises(ValueError, match="Speaker ID must be an integer"):
            validate_speaker_payload({"id": "1", "name": "Ada"})

    @pytest.mark.parametrize("bad_name", [123, None, ["Ada"]])
    def test_non_string_name_raises_error(self, bad_name):
        with pytest.raises(ValueError, match="Speaker name must be a string"):
            validate_speaker_payload({"id": 1, "name": bad_name})


class TestValidateSessionId:
    """Test validate_session_id function."""

    def test_integer_is_valid(self):
        assert validate_session_id(42) == (True, "")

    @pytest.mark.parametrize("value", ["42", None, 4.2, False])
    def test_non_integer_is_invalid(self, value):
        is_valid, message = validate_session_id(value)
        assert is_valid is False
        assert message == "議程編號必須為整數"


class TestParseDayParam:
    """Test parse_day_param function."""

    def test_missing_defaults_to_zero(self):
        assert parse_day_param(None) == 0

    def test_empty_defaults_to_zero(self):
        assert parse_day_param("") == 0

    def test_integer_string(self):
        assert parse_day_param("2") == 2

    def test_whitespace_is_ignored(self):
        assert parse_day_param(" 1 ") == 1

    def test_negative_integer_is_kept(self):
        assert parse_day_param("-1") == -1

    def test_non_integer_defaults_to_zero(self):
        assert parse_day_param("tuesday") == 0


class TestValidateName:
    """Test validate_name function."""

    def test_valid_name(self):
        assert validate_name("Ada Lovelace") == (True, "")

    def test_chinese_name(self):
        assert validate_name("張三") == (True, "")

    def test_empty_name(self):
        assert validate_name("") == (False, "姓名不可為空")

    def test_whitespace_name(self):
        assert validate_name("   ") == (False, "姓名不可為空")

    def test_name_too_long(self):
        assert validate_name("a" * 51) == (False, "姓名長度不可超過 50 字元")

    def test_name_at_limit(self):
        assert validate_name("a" * 50) == (True, "")

    def test_name_with_slash(self):
        assert validate_name("ada/admin") == (False, "姓名不可包含 / 字元")
