"""Tests for domain normalization."""

from __future__ import annotations

import pytest

from domaincheck.core.domains import domain_suffix, normalize_domain
from domaincheck.core.exceptions import InvalidInputError


class TestNormalizeDomain:
    """Tests for normalize_domain."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("example.com", "example.com"),
            ("  Example.COM  ", "example.com"),
            ("example.com.", "example.com"),
            ("münchen.de", "xn--mnchen-3ya.de"),
            ("BÜCHER.example", "xn--bcher-kva.example"),
        ],
    )
    def test_normalizes(self, raw: str, expected: str):
        assert normalize_domain(raw) == expected

    @pytest.mark.parametrize("raw", ["", "   ", "."])
    def test_rejects_empty(self, raw: str):
        with pytest.raises(InvalidInputError, match="must not be empty"):
            normalize_domain(raw)

    @pytest.mark.parametrize("raw", [None, 42, ["example.com"], {"domain": "example.com"}])
    def test_rejects_non_strings(self, raw):
        with pytest.raises(InvalidInputError, match="must be a string"):
            normalize_domain(raw)

    def test_rejects_invalid_idn(self):
        with pytest.raises(InvalidInputError, match="Invalid internationalized domain"):
            normalize_domain("☃-example.com")


class TestDomainSuffix:
    """Tests for domain_suffix."""

    def test_last_label(self):
        assert domain_suffix("www.example.co.uk") == "uk"
        assert domain_suffix("free-xyz123.test") == "test"

    def test_bare_label(self):
        assert domain_suffix("localhost") is None
