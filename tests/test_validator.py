"""Tests for sift.validation.validator — field chains and aggregate queries."""

import math

from sift.validation import UNDEFINED, Validation, ValidationResult, Validator


class TestValidate:
    def test_returns_stop_on_fail_chain(self) -> None:
        chain = Validator({"foo": "bar"}).validate("foo")
        assert isinstance(chain, Validation)
        assert chain.key == "foo"
        assert chain.value == "bar"
        assert chain.stop_on_fail is True

    def test_validate_all_returns_collecting_chain(self) -> None:
        chain = Validator({"foo": "bar"}).validate_all("foo")
        assert chain.stop_on_fail is False

    def test_missing_field_is_undefined(self) -> None:
        validator = Validator({})
        chain = validator.validate("missing")
        assert chain.value is UNDEFINED
        assert "missing" in validator

    def test_null_field_is_not_undefined(self) -> None:
        validator = Validator({"n": None})
        validator.validate("n").is_defined("missing")
        assert validator.has_failures() is False
        validator.validate("n").not_null("null")
        assert validator.get_messages("n") == ["null"]

    def test_trim(self) -> None:
        validator = Validator({"x": "  bar  "})
        validator.validate("x", True).has_length(3, "trimmed")
        assert validator.has_failures() is False
        assert validator.get_value("x") == "bar"

    def test_no_trim_by_default(self) -> None:
        validator = Validator({"x": "  bar  "})
        validator.validate("x").has_length(3, "untrimmed")
        assert validator.get_messages("x") == ["untrimmed"]

    def test_trim_leaves_non_strings(self) -> None:
        validator = Validator({"n": 12})
        assert validator.validate("n", trim=True).value == 12

    def test_revalidating_replaces_chain(self) -> None:
        validator = Validator({"foo": "bar"})
        validator.validate("foo").has_length(4, "bad")
        assert validator.has_failures("foo") is True
        validator.validate("foo").has_length(3, "good")
        assert validator.has_failures("foo") is False
        assert validator.get_messages("foo") == []

    def test_revalidating_starts_from_source_value(self) -> None:
        validator = Validator({"n": "12"})
        validator.validate("n").to_int()
        validator.validate("n")
        assert validator.get_value("n") == "12"

    def test_empty_source(self) -> None:
        validator = Validator()
        assert validator.source == {}
        assert validator.validate("x").value is UNDEFINED


class TestHasFailures:
    def test_empty_validator_has_no_failures(self) -> None:
        assert Validator({"foo": "bar"}).has_failures() is False

    def test_unvalidated_name_has_failures(self) -> None:
        validator = Validator({"foo": "bar"})
        assert validator.has_failures("foo") is True
        assert validator.get_messages("foo") == []

    def test_any_failure(self) -> None:
        validator = Validator({"a": "x", "b": "y"})
        validator.validate("a").has_length(1, "a")
        assert validator.has_failures() is False
        validator.validate("b").has_length(2, "b")
        assert validator.has_failures() is True
        assert validator.has_failures("a") is False
        assert validator.has_failures("b") is True


class TestMessages:
    def test_simple_object(self) -> None:
        validator = Validator({"foo": "bar"})

        validator.validate("foo").has_length(3, "error msg")
        assert validator.has_failures() is False
        assert validator.all_messages() == []

        validator.validate("foo").has_length(4, "error msg").has_length(5, "error msg 2")
        assert validator.has_failures() is True
        assert validator.all_messages() == ["error msg"]

        validator.validate_all("foo").has_length(4, "error msg").has_length(5, "error msg 2")
        assert validator.get_messages("foo") == ["error msg", "error msg 2"]
        assert validator.all_messages() == ["error msg", "error msg 2"]

    def test_all_fields_in_first_validated_order(self) -> None:
        validator = Validator({"a": "1", "b": "2", "c": "3"})
        validator.validate("b").has_length(2, "b")
        validator.validate("a")
        validator.validate("c")
        validator.validate("b").has_length(3, "b again")
        assert list(validator.get_messages()) == ["b", "a", "c"]
        assert validator.get_messages() == {"b": ["b again"], "a": [], "c": []}

    def test_messages_are_copies(self) -> None:
        validator = Validator({"a": "1"})
        validator.validate("a").has_length(2, "bad")
        validator.get_messages("a").append("tampered")
        validator.get_messages()["a"].append("tampered")
        assert validator.get_messages("a") == ["bad"]

    def test_complex_valid_object(self) -> None:
        validator = Validator(
            {
                "isAlpha": "asdfASDF",
                "isAlphanumeric": "asdfASDF12345",
                "isDateFormat": "dd-MM-yyyy",
                "isUrl": "http://ringojs.org",
                "isEmail": "test@ringojs.org",
                "isFileName": "test.jpg",
                "isHexColor": "#123456",
                "isNumeric": "123456",
                "isInt": "123456",
                "isFloat": "123.456",
                "isNumber": "123.456",
                "minLength": "string",
                "maxLength": "string",
                "lengthBetween": "string",
                "hasLength": "string",
                "equal": "true",
                "strictEqual": True,
                "isTrue": True,
                "isFalse": False,
                "isDefined": "defined",
                "notNull": "notNull",
                "matches": "abcd",
                "passes": "abcd",
            }
        )
        _validate_every_field(validator)
        assert validator.has_failures() is False
        assert validator.all_messages() == []

    def test_complex_invalid_object(self) -> None:
        validator = Validator(
            {
                "isAlpha": "asdfASDF1",
                "isAlphanumeric": "asdfASDF12345#",
                "isDateFormat": "dd-MM-yyyy NOTADATEFORMAT",
                "isUrl": "invalid",
                "isEmail": "invalid@",
                "isFileName": "/asdf/asdf/asdf/",
                "isHexColor": "#1234567",
                "isNumeric": "123456asdf",
                "isInt": "123456.456",
                "isFloat": "123",
                "isNumber": "123.456asdf",
                "minLength": "",
                "maxLength": "string+1",
                "lengthBetween": "string+1",
                "hasLength": "string+1",
                "equal": "false",
                "strictEqual": False,
                "isTrue": False,
                "isFalse": True,
                "strictNotNull": None,
                "matches": "abcd",
                "passes": "abcd",
            }
        )
        _validate_every_field(validator, pattern=r"12345", expected="other")
        assert validator.has_failures() is True
        assert len(validator.all_messages()) == 24
        assert all(validator.has_failures(name) for name in validator.get_messages())


def _validate_every_field(validator: Validator, pattern: str = r"abcd", expected: str = "abcd") -> None:
    validator.validate("isAlpha").is_alpha("error msg isAlpha")
    validator.validate("isAlphanumeric").is_alphanumeric("error msg isAlphanumeric")
    validator.validate("isDateFormat").is_date_format("error msg isDateFormat")
    validator.validate("isUrl").is_url("error msg isUrl")
    validator.validate("isEmail").is_email("error msg isEmail")
    validator.validate("isFileName").is_filename("error msg isFileName")
    validator.validate("isHexColor").is_hex_color("error msg isHexColor")
    validator.validate("isNumeric").is_numeric("error msg isNumeric")
    validator.validate("isInt").is_int("error msg isInt")
    validator.validate("isFloat").is_float("error msg isFloat")
    validator.validate("isNumber").is_number("error msg isNumber")
    validator.validate("minLength").min_length(6, "error msg minLength")
    validator.validate("maxLength").max_length(6, "error msg maxLength")
    validator.validate("lengthBetween").length_between(5, 7, "error msg lengthBetween")
    validator.validate("hasLength").has_length(6, "error msg hasLength")
    validator.validate("equal").equal("true", "error msg equal")
    validator.validate("strictEqual").strict_equal(True, "error msg strictEqual")
    validator.validate("isTrue").is_true("error msg isTrue")
    validator.validate("isFalse").is_false("error msg isFalse")
    validator.validate("isDefined").is_defined("error msg isDefined")
    validator.validate("notNull").not_null("error msg notNull")
    validator.validate("strictNotNull").strict_not_null("error msg strictNotNull")
    validator.validate("matches").matches(pattern, "error msg matches")
    validator.validate("passes").passes(lambda value: value == expected, "error msg passes")


class TestValues:
    def test_get_value_unknown_name(self) -> None:
        assert Validator({"a": "1"}).get_value("a") is UNDEFINED

    def test_get_values(self) -> None:
        validator = Validator({"a": "1", "b": "x"})
        validator.validate("a").to_int()
        validator.validate("b")
        validator.validate("c")
        assert validator.get_values() == {"a": 1, "b": "x", "c": UNDEFINED}

    def test_age_passes(self) -> None:
        validator = Validator({"age": "19"})
        validator.validate("age").is_int("bad").to_int().greater_than(17, "too young")
        assert validator.has_failures() is False
        assert validator.get_value("age") == 19

    def test_age_too_young(self) -> None:
        validator = Validator({"age": "15"})
        validator.validate("age").is_int("bad").to_int().greater_than(17, "too young")
        assert validator.all_messages() == ["too young"]
        assert validator.get_value("age") == 15
        assert isinstance(validator.get_value("age"), int)

    def test_sanitizers(self) -> None:
        validator = Validator(
            {
                "date": "1970-01-01T00:00:00+00:00",
                "float": "123.456",
                "int": "123456",
                "boolean": "asdf",
                "booleanStrict": "1",
            }
        )
        assert validator.validate("date").to_date().get_value().timestamp() == 0
        assert validator.validate("float").to_float().get_value() == 123.456
        assert validator.validate("int").to_int().get_value() == 123456
        assert validator.validate("boolean").to_boolean().get_value() is True
        assert validator.validate("booleanStrict").to_boolean(True).get_value() is True

    def test_not_a_number_after_failed_conversion(self) -> None:
        validator = Validator({"n": "abc"})
        validator.validate("n").to_float().is_not_nan("not a number")
        assert math.isnan(validator.get_value("n"))
        assert validator.get_messages("n") == ["not a number"]


class TestUncheckedProperties:
    def test_unchecked(self) -> None:
        validator = Validator({"a": "1", "b": "2", "c": "3"})
        validator.validate("b")
        assert validator.has_unchecked_properties() is True
        assert validator.unchecked_properties() == ["a", "c"]

    def test_all_checked(self) -> None:
        validator = Validator({"a": "1", "b": "2"})
        validator.validate("a")
        validator.validate_all("b")
        validator.validate("extra")
        assert validator.has_unchecked_properties() is False
        assert validator.unchecked_properties() == []

    def test_empty_source(self) -> None:
        assert Validator({}).has_unchecked_properties() is False


class TestResult:
    def test_valid(self) -> None:
        validator = Validator({"age": "19"})
        validator.validate("age").to_int()
        result = validator.result()
        assert isinstance(result, ValidationResult)
        assert result
        assert result.is_valid
        assert result.data == {"age": 19}
        assert result.errors == {}

    def test_invalid(self) -> None:
        validator = Validator({"age": "15", "name": "bob"})
        validator.validate("age").to_int().greater_than(17, "too young")
        validator.validate("name").is_alpha("letters only")
        result = validator.result()
        assert not result
        assert result.data == {"name": "bob"}
        assert result.errors == {"age": ["too young"]}


class TestRepr:
    def test_repr(self) -> None:
        validator = Validator({"a": "1"})
        validator.validate("a")
        assert repr(validator) == "Validator(fields=['a'], failures=False)"
