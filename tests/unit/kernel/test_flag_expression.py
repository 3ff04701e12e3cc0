"""Unit tests for flag expressions — ``check`` and the term helpers."""

from __future__ import annotations

import pytest

from mp_flags import FlagDefinition, FlagRegistry
from mp_flags.kernel.flags import expression as expr


@pytest.fixture
def registry() -> FlagRegistry:
    return FlagRegistry(
        FlagDefinition("admin", "A", level=3),
        FlagDefinition("user", "U", level=1),
        FlagDefinition("guest", "G"),
    )


# ---------------------------------------------------------------------------
# Term helpers
# ---------------------------------------------------------------------------


class TestTermHelpers:
    def test_tokenize_drops_empty_tokens(self) -> None:
        assert expr.tokenize("  a  b ") == ["a", "b"]

    def test_tokenize_none_and_empty(self) -> None:
        assert expr.tokenize(None) == []
        assert expr.tokenize("") == []

    def test_threshold_base(self) -> None:
        assert expr.is_threshold("admin+")
        assert expr.threshold_base("admin+") == "admin"

    def test_strip_negation(self) -> None:
        assert expr.strip_negation("!admin") == "admin"
        assert expr.strip_negation("admin") == "admin"

    def test_compare_flag(self) -> None:
        current = frozenset({"admin"})
        assert expr.compare_flag("admin", current) is True
        assert expr.compare_flag("!admin", current) is False
        assert expr.compare_flag("!guest", current) is True

    def test_any_alternative(self) -> None:
        current = frozenset({"user"})
        assert expr.any_alternative("admin|user", current) is True
        assert expr.any_alternative("admin|guest", current) is False


# ---------------------------------------------------------------------------
# check
# ---------------------------------------------------------------------------


class TestCheck:
    def test_plain_presence(self, registry: FlagRegistry) -> None:
        assert registry.check("admin user", "admin") is True
        assert registry.check("user", "admin") is False

    def test_terms_are_anded(self, registry: FlagRegistry) -> None:
        assert registry.check("admin user", "admin user") is True
        assert registry.check("admin", "admin user") is False

    def test_negation(self, registry: FlagRegistry) -> None:
        assert registry.check("admin user", "!guest") is True
        assert registry.check("admin user", "!admin") is False

    def test_alternation(self, registry: FlagRegistry) -> None:
        assert registry.check("admin user", "admin|guest") is True
        assert registry.check("guest", "admin|moderator") is False

    def test_negation_inside_alternation(self, registry: FlagRegistry) -> None:
        assert registry.check("user", "!admin|guest") is True
        assert registry.check("admin", "!admin|guest") is False

    def test_threshold_not_expanded_inside_alternation(
        self, registry: FlagRegistry
    ) -> None:
        # "admin+" is a literal alternative here, not a level test
        assert registry.check("admin", "admin+|guest") is False
        assert registry.check("admin+", "admin+|guest") is True

    def test_threshold(self, registry: FlagRegistry) -> None:
        assert registry.check("admin", "admin+") is True
        assert registry.check("", "admin+") is False

    def test_threshold_compares_levels(self, registry: FlagRegistry) -> None:
        assert registry.check("admin", "user+") is True
        assert registry.check("user", "admin+") is False
        assert registry.check("guest", "guest+") is True

    def test_threshold_resolves_codes_in_list(self, registry: FlagRegistry) -> None:
        assert registry.check("A", "admin+") is True

    def test_threshold_unknown_base_is_false(self, registry: FlagRegistry) -> None:
        assert registry.check("admin", "root+") is False

    def test_empty_expression_is_vacuously_true(self, registry: FlagRegistry) -> None:
        assert registry.check("anything", "") is True
        assert registry.check("", "   ") is True
        assert registry.check("admin", None) is True

    def test_presence_is_exact_string(self, registry: FlagRegistry) -> None:
        assert registry.check("admin", "A") is False
        assert registry.check("admin", "ADMIN") is False

    def test_repeated_whitespace_tolerated(self, registry: FlagRegistry) -> None:
        assert registry.check("admin   user", "  admin    user  ") is True

    def test_mixed_expression(self, registry: FlagRegistry) -> None:
        assert registry.check("admin user", "admin|guest !banned user+") is True
        assert registry.check("user banned", "admin|user !banned") is False
