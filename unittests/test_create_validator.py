from typing import Any, Optional

import pytest

from fieldvalidators import ConfiguredValidator, Options, create_validator

is_even = create_validator(
    lambda message: lambda value: message if value % 2 else None,
    lambda field: f"{field} must be even",
)


class TestCreateValidator:
    @pytest.mark.parametrize("value", [0, 2, -4, 100])
    def test_valid_values_return_none(self, value: int):
        assert is_even("Count")(value) is None

    @pytest.mark.parametrize("value", [1, 3, -5])
    def test_invalid_values_return_default_message(self, value: int):
        assert is_even("Count")(value) == "Count must be even"

    def test_one_step_call(self):
        assert is_even("Count", 3) == "Count must be even"
        assert is_even("Count", 4) is None

    def test_explicit_none_is_a_value(self):
        is_present = create_validator(lambda message: lambda value: message if value is None else None, "missing")
        assert is_present("Field", None) == "missing"
        assert isinstance(is_present("Field"), ConfiguredValidator)

    def test_curried_call_returns_configured_validator(self):
        configured = is_even("Count")
        assert isinstance(configured, ConfiguredValidator)
        assert configured.options == Options(field="Count")

    def test_message_override(self):
        assert is_even({"message": "X"})(3) == "X"
        assert is_even({"field": "Count", "message": "X"})(3) == "X"
        assert is_even(Options(message="X"))(3) == "X"

    def test_field_from_options(self):
        assert is_even({"field": "Count"})(3) == "Count must be even"

    def test_literal_message(self):
        validator = create_validator(lambda message: lambda value: message if not value else None, "Nope")
        assert validator("Whatever")("") == "Nope"
        assert validator({"field": "Other"})(0) == "Nope"

    @pytest.mark.parametrize("config", [None, 42, ["Count"], {"unknown": True}])
    def test_unsupported_config_degrades(self, config: Any):
        assert is_even(config)(3) == "None must be even"

    def test_predicate_receives_all_values(self):
        received: list[Any] = []

        def predicate_builder(message: str):
            def predicate(value: Any, all_values: Any = None) -> Optional[str]:
                received.append(all_values)
                return None

            return predicate

        validator = create_validator(predicate_builder, "irrelevant")
        validator("Field")("value", {"field": "value"})
        validator("Field", "value")
        assert received == [{"field": "value"}, None]

    def test_defaulted_predicate_parameters_are_kept(self):
        validator = create_validator(lambda message: lambda value, msg=message: msg if not value else None, "bad")
        assert validator("F")("") == "bad"
        assert validator("F")("", {"F": ""}) == "bad"
        assert validator("F")("x") is None

    def test_all_values_as_keyword_only_or_kwargs(self):
        def keyword_only_builder(message: str):
            def predicate(value: Any, *, all_values: Any = None) -> Optional[str]:
                return message if all_values and value != all_values["other"] else None

            return predicate

        def kwargs_builder(message: str):
            def predicate(value: Any, **kwargs: Any) -> Optional[str]:
                return message if kwargs["all_values"] is None else None

            return predicate

        assert create_validator(keyword_only_builder, "differs")("F")("a", {"other": "b"}) == "differs"
        assert create_validator(keyword_only_builder, "differs")("F")("a", {"other": "a"}) is None
        assert create_validator(kwargs_builder, "no record")("F")("a") == "no record"

    def test_config_is_not_mutated(self):
        config = {"field": "Count", "message": "X"}
        is_even(config)(3)
        assert config == {"field": "Count", "message": "X"}

    def test_validators_are_reusable(self):
        configured = is_even("Count")
        assert [configured(value) for value in (1, 2, 3)] == ["Count must be even", None, "Count must be even"]

    def test_invalid_builders_raise(self):
        with pytest.raises(TypeError):
            create_validator("not callable", "message")  # type:ignore[arg-type]
        with pytest.raises(TypeError):
            create_validator(lambda message: lambda value: None, 42)  # type:ignore[arg-type]

    def test_name(self):
        assert create_validator(lambda message: lambda value: None, "", name="noop").name == "noop"
