"""Tests for sift.strings — string classification."""

import pytest

from sift import strings


class TestCharacterClasses:
    def test_alpha(self) -> None:
        assert strings.is_alpha("asdfASDF") is True
        assert strings.is_alpha("asdf1") is False
        assert strings.is_alpha("") is False

    def test_alphanumeric(self) -> None:
        assert strings.is_alphanumeric("asdf1234") is True
        assert strings.is_alphanumeric("asdf 1234") is False

    def test_numeric(self) -> None:
        assert strings.is_numeric("0123") is True
        assert strings.is_numeric("-1") is False
        assert strings.is_numeric("1.0") is False


class TestNumberLiterals:
    @pytest.mark.parametrize("value", ["0", "42", "-42", "+7"])
    def test_int(self, value: str) -> None:
        assert strings.is_int(value) is True

    @pytest.mark.parametrize("value", ["", "1.0", "1e3", " 1", "1_000", "0x1f"])
    def test_not_int(self, value: str) -> None:
        assert strings.is_int(value) is False

    @pytest.mark.parametrize("value", ["1.5", "-0.5", ".5", "5.", "1.5e3", "+2.0E-2", "1e5", "-2E-3"])
    def test_float(self, value: str) -> None:
        assert strings.is_float(value) is True

    @pytest.mark.parametrize("value", ["", "123", "1.2.3", "abc", "1.5e", "e5", "1e", "nan", "inf"])
    def test_not_float(self, value: str) -> None:
        assert strings.is_float(value) is False


class TestFormats:
    @pytest.mark.parametrize("value", ["test@ringojs.org", "first.last@sub.domain.org"])
    def test_email(self, value: str) -> None:
        assert strings.is_email(value) is True

    @pytest.mark.parametrize("value", ["invalid@", "userexample.com", "", "a@b@c.org"])
    def test_not_email(self, value: str) -> None:
        assert strings.is_email(value) is False

    @pytest.mark.parametrize("value", ["http://ringojs.org", "https://example.com/path?q=1", "ftp://files.org/a"])
    def test_url(self, value: str) -> None:
        assert strings.is_url(value) is True

    @pytest.mark.parametrize("value", ["invalid", "example.com", "mailto:me@example.com", "http://"])
    def test_not_url(self, value: str) -> None:
        assert strings.is_url(value) is False

    def test_filename(self) -> None:
        assert strings.is_filename("test.jpg") is True
        assert strings.is_filename("my file (1).txt") is True
        assert strings.is_filename("/asdf/asdf/") is False
        assert strings.is_filename("a:b") is False
        assert strings.is_filename("tab\there") is False
        assert strings.is_filename("") is False

    @pytest.mark.parametrize("value", ["#123456", "123456", "#abc", "ABCDEF"])
    def test_hex_color(self, value: str) -> None:
        assert strings.is_hex_color(value) is True

    @pytest.mark.parametrize("value", ["#1234567", "#12", "#ggg", "##123"])
    def test_not_hex_color(self, value: str) -> None:
        assert strings.is_hex_color(value) is False


class TestDateFormat:
    @pytest.mark.parametrize(
        "value",
        ["dd-MM-yyyy", "yyyy-MM-dd'T'HH:mm:ss.SSSZ", "EEE, d MMM yyyy", "hh 'o''clock' a", "''"],
    )
    def test_valid(self, value: str) -> None:
        assert strings.is_date_format(value) is True

    @pytest.mark.parametrize("value", ["dd-MM-yyyy NOTADATEFORMAT", "abc", "'unterminated", ""])
    def test_invalid(self, value: str) -> None:
        assert strings.is_date_format(value) is False
