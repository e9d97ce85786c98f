"""
Tests for proxy address normalization.
"""
import pytest
from proxy_toggle import normalize_address, compile_pattern, InvalidAddressError, InvalidPatternError


class TestNormalizeAddress:
    @pytest.mark.parametrize("address,expected", [
        ("http://localhost:8080", "localhost:8080"),
        ("https://proxy.corp:3128", "proxy.corp:3128"),
        ("socks5://10.0.0.1:1080", "10.0.0.1:1080"),
    ])
    def test_strips_scheme(self, address, expected):
        assert normalize_address(address) == expected

    def test_bare_address_unchanged(self):
        """An address without // is returned as is."""
        assert normalize_address("proxy:8080") == "proxy:8080"
        assert normalize_address("") == ""

    @pytest.mark.parametrize("address", [None, 8080, ("proxy", 8080), b"http://proxy:8080"])
    def test_non_string_raises(self, address):
        with pytest.raises(InvalidAddressError) as exc_info:
            normalize_address(address)
        assert exc_info.value.address == address


class TestCompilePattern:
    def test_valid_regex(self):
        assert compile_pattern(r"^(localhost|10\..*)").search("10.0.0.1")

    @pytest.mark.parametrize("pattern", ["*.corp.example", "(unclosed", "[a-"])
    def test_invalid_regex(self, pattern):
        """Glob-style NO_PROXY values are not regexes and are rejected."""
        with pytest.raises(InvalidPatternError) as exc_info:
            compile_pattern(pattern)
        assert exc_info.value.pattern == pattern

    def test_non_string(self):
        with pytest.raises(InvalidPatternError):
            compile_pattern(42)
