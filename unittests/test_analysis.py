import pytest

from fieldvalidators import ValidationResult, has_error, has_error_at, has_error_only_at

ERROR_RECORD = {
    "name": "Name is required",
    "contact": {"email": "Email is required", "phone": ["Phone must be numeric", "Phone is too short"]},
    "phones": [None, "Phone must be numeric"],
}


class TestValidationResult:
    def test_all_errors_are_sorted_by_path(self):
        result = ValidationResult(ERROR_RECORD)
        assert result.all_errors == [
            ("contact.email", "Email is required"),
            ("contact.phone.0", "Phone must be numeric"),
            ("contact.phone.1", "Phone is too short"),
            ("name", "Name is required"),
            ("phones.1", "Phone must be numeric"),
        ]

    def test_counts(self):
        result = ValidationResult(ERROR_RECORD)
        assert result.num_errors_total == 5
        assert result.num_errors_per_field == {"contact": 3, "name": 1, "phones": 1}
        assert result.error_fields == ["contact", "name", "phones"]
        assert result.error_paths == ["contact.email", "contact.phone.0", "contact.phone.1", "name", "phones.1"]
        assert not result.is_valid

    @pytest.mark.parametrize("error_record", [{}, None])
    def test_valid(self, error_record):
        result = ValidationResult(error_record)
        assert result.is_valid
        assert result.all_messages == []
        assert result.error_fields == []
        assert result.error_paths == []


class TestAssertions:
    @pytest.mark.parametrize(
        "result, expected",
        [
            pytest.param(None, False, id="none"),
            pytest.param({}, False, id="empty record"),
            pytest.param([], False, id="empty list"),
            pytest.param("error", True, id="message"),
            pytest.param(["error"], True, id="messages"),
            pytest.param({"a": {"b": None}}, False, id="nested without error"),
            pytest.param(ERROR_RECORD, True, id="record"),
        ],
    )
    def test_has_error(self, result, expected: bool):
        assert has_error(result) is expected

    def test_has_error_at(self):
        assert has_error_at(ERROR_RECORD, "name")
        assert has_error_at(ERROR_RECORD, "contact.email")
        assert has_error_at(ERROR_RECORD, "contact")
        assert has_error_at(ERROR_RECORD, "phones.1")
        assert not has_error_at(ERROR_RECORD, "phones.0")
        assert not has_error_at(ERROR_RECORD, "phones.5")
        assert not has_error_at(ERROR_RECORD, "age")
        assert has_error_at(ERROR_RECORD)

    def test_has_error_only_at(self):
        assert has_error_only_at({"contact": {"email": "Email is required"}}, "contact")
        assert has_error_only_at({"contact": {"email": "Email is required"}}, "contact.email")
        assert not has_error_only_at(ERROR_RECORD, "name")
        assert not has_error_only_at({"name": "Name is required"}, "contact")
        assert not has_error_only_at({"contacts": "error"}, "contact")
