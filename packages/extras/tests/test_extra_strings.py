"""Tests for the extra string validators."""

import pytest

from valknobs_core import ValidationError, required
from valknobs_core import strings as core_strings
from valknobs_extras import strings


def rejects(validator, value):
    with pytest.raises(ValidationError) as exc_info:
        validator(value)
    return exc_info.value


class TestEmail:
    """Test email validation."""

    @pytest.mark.parametrize("value", ["user@gmail.com", "first.last+tag@mail.python.org"])
    def test_valid(self, value):
        """Test syntactically valid addresses pass."""
        assert strings.email()(value) == value

    @pytest.mark.parametrize("value", ["", "user", "user@", "@gmail.com", "a b@gmail.com"])
    def test_invalid(self, value):
        """Test malformed addresses fail."""
        assert rejects(strings.email(), value).message == "value is not an email"

    def test_absent(self):
        """Test None passes through."""
        assert strings.email()(None) is None


class TestUrl:
    """Test URL validation."""

    def test_parses(self):
        """Test a URL is split into its parts."""
        parts = strings.url()("https://example.com:8443/path?q=1")
        assert parts.scheme == "https"
        assert parts.hostname == "example.com"
        assert parts.port == 8443
        assert parts.path == "/path"
        assert parts.query == "q=1"

    @pytest.mark.parametrize("value", ["example.com", "/relative/path", "http://example.com:99999", "http://"])
    def test_invalid(self, value):
        """Test relative or malformed URLs fail."""
        assert rejects(strings.url(), value).message == "Not a valid URL"

    def test_protocol(self):
        """Test the scheme check accepts a trailing colon."""
        assert strings.url(protocol="https:")("https://example.com").scheme == "https"
        assert rejects(strings.url(protocol="https"), "http://example.com").message == "Invalid protocol: https"

    def test_port(self):
        """Test the explicit port check."""
        assert strings.url(port=8080)("http://example.com:8080").port == 8080
        assert rejects(strings.url(port="8080"), "http://example.com").message == "Invalid port: 8080"

    def test_url_as_string(self):
        """Test the string form is kept."""
        assert strings.url_as_string()("ftp://example.com/file") == "ftp://example.com/file"
        rejects(strings.url_as_string(), "not a url")


class TestGuid:
    """Test GUID validation."""

    V4 = "3b241101-e2bb-4255-8caf-4136c566a962"
    V1 = "c232ab00-9414-11ec-b3c8-9f6bdeced846"
    NIL = "00000000-0000-0000-0000-000000000000"

    def test_any_version(self):
        """Test any version passes by default."""
        assert strings.guid()(self.V4) == self.V4
        assert strings.guid()(self.V1.upper()) == self.V1.upper()

    def test_specific_version(self):
        """Test the version digit is checked."""
        assert strings.guid(version=4)(self.V4) == self.V4
        assert rejects(strings.guid(version=4), self.V1).message == "value is not a uuid version 4"

    def test_nil(self):
        """Test the nil GUID needs allow_nil."""
        assert rejects(strings.guid(), self.NIL).message == "value is not a uuid"
        assert strings.guid(allow_nil=True)(self.NIL) == self.NIL

    @pytest.mark.parametrize("value", ["", "3b241101e2bb42558caf4136c566a962", "3b241101-e2bb-4255-8caf-4136c566a962\n"])
    def test_invalid(self, value):
        """Test malformed GUIDs fail."""
        rejects(strings.guid(), value)


class TestSimpleChecks:
    """Test the simple string checks and transforms."""

    @pytest.mark.parametrize("value,ok", [
        ("example.com", True),
        ("a-b.c.example.org", True),
        ("localhost", False),
        ("Example.com", False),
        ("example.com\n", False),
    ])
    def test_hostname(self, value, ok):
        """Test dotted lowercase hostnames."""
        if ok:
            assert strings.hostname()(value) == value
        else:
            assert rejects(strings.hostname(), value).message == "value is not a hostname"

    def test_affixes(self):
        """Test starts_with, ends_with and contains."""
        assert strings.starts_with("ab")("abc") == "abc"
        assert rejects(strings.starts_with("b"), "abc").message == "value does not start with: b"
        assert strings.ends_with("bc")("abc") == "abc"
        assert rejects(strings.ends_with("b"), "abc").message == "value does not end with: b"
        assert strings.contains("b")("abc") == "abc"
        assert rejects(strings.contains("d"), "abc").message == "value does not contain: d"

    def test_case_and_trim(self):
        """Test the transforms."""
        assert strings.lowercase()("AbC") == "abc"
        assert strings.uppercase()("AbC") == "ABC"
        assert strings.trim()("  a b \n") == "a b"

    @pytest.mark.parametrize("value,ok", [
        ("+14155552671", True),
        ("4155552671", True),
        ("+0123", False),
        ("+1", False),
        ("+1-415-555", False),
    ])
    def test_phone_number(self, value, ok):
        """Test E.164 numbers."""
        if ok:
            assert strings.phone_number()(value) == value
        else:
            assert rejects(strings.phone_number(), value).message == "value does not match E.164 numbering plan"

    def test_chained_with_core(self):
        """Test extras compose with core validators."""
        validator = required().and_(core_strings.is_()).and_(strings.trim()).and_(strings.lowercase())
        assert validator("  HeLLo ") == "hello"
        rejects(validator, 3)


class TestBase64:
    """Test base64 validation."""

    @pytest.mark.parametrize("value", ["", "aGk=", "aGVsbG8gd29ybGQ=", "YWJj"])
    def test_valid(self, value):
        """Test padded standard base64 passes."""
        assert strings.is_base64()(value) == value

    @pytest.mark.parametrize("value", ["aGk", "a===", "aGk=\n", "-_-_"])
    def test_invalid(self, value):
        """Test unpadded or foreign alphabets fail."""
        assert rejects(strings.is_base64(), value).message == "value is not base64 (rfc4648)"

    def test_url_variant(self):
        """Test the URL safe alphabet."""
        assert strings.is_base64("rfc4648-url")("-_-_") == "-_-_"
        rejects(strings.is_base64("rfc4648-url"), "+/+/")

    def test_unknown_variant(self):
        """Test an unknown variant is a usage error."""
        with pytest.raises(ValueError):
            strings.is_base64("rfc2045")
