"""Unit tests for the Email value object."""

import hashlib

import pytest
from pydantic import ValidationError

from connector.domain.value import Email, split_skills


class TestEmail:
    """Tests for Email normalization and validation."""

    def test_normalizes_case_and_whitespace(self):
        """Addresses differing only by case or padding are equal."""
        assert Email("  Ada@Example.COM ") == Email("ada@example.com")
        assert Email("Ada@Example.COM").root == "ada@example.com"

    @pytest.mark.parametrize("raw", ["", "ada", "ada@", "@example.com", "a b@c.io"])
    def test_rejects_malformed_addresses(self, raw):
        with pytest.raises(ValidationError, match="Please include a valid email"):
            Email(raw)

    def test_gravatar_url_uses_md5_of_normalized_address(self):
        """Avatar URL is derived from the lowercased address."""
        digest = hashlib.md5(b"ada@example.com").hexdigest()

        url = Email("ADA@example.com").gravatar_url()

        assert url == f"https://www.gravatar.com/avatar/{digest}?s=200&r=pg&d=mm"


class TestSplitSkills:
    """Tests for split_skills."""

    def test_splits_comma_separated_string(self):
        assert split_skills("python, go ,, rust ") == ["python", "go", "rust"]

    def test_cleans_list_input(self):
        assert split_skills([" python", "", "go"]) == ["python", "go"]
