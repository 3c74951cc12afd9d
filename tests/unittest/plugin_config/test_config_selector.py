"""
Unit tests for GlobConfigSelector and glob matching.
"""

import pytest

from import_sort_config.plugin_config.config_selector import GlobConfigSelector, split_glob_group
from import_sort_config.plugin_config.config_types import ConfigFragment, InlineReference, ShortName
from import_sort_config.plugin_config.glob_matcher import expand_braces, matches


class TestGlobMatcher:
    """Tests for the glob matching helpers."""

    def test_literal_extension(self):
        """Test matching an extension against itself."""
        assert matches(".ts", ".ts")
        assert not matches(".tsx", ".ts")
        assert not matches(".ts", ".tsx")

    def test_wildcards(self):
        """Test star and question mark wildcards."""
        assert matches("file.ts", "*.ts")
        assert matches("file.tsx", "*.ts?")
        assert not matches("file.js", "*.ts")

    def test_brace_group(self):
        """Test that brace groups match any of their alternatives."""
        assert matches(".jsx", ".{js,jsx}")
        assert matches(".js", ".{js,jsx}")
        assert not matches(".ts", ".{js,jsx}")

    def test_negation(self):
        """Test that a leading ! negates the rest of the pattern."""
        assert matches(".ts", "!.css")
        assert not matches(".css", "!.css")
        assert matches(".css", "!!.css")
        assert not matches(".js", "!.{js,jsx}")
        assert matches(".ts", "!.{js,jsx}")

    def test_comment_pattern_never_matches(self):
        """Test that a pattern starting with # is a comment."""
        assert not matches("#.ts", "#.ts")
        assert not matches(".ts", "# .ts")

    def test_pattern_anchored_to_whole_candidate(self):
        """Test that wildcards do not match across directory separators."""
        assert not matches("src/a.ts", "*.ts")
        assert not matches("a.ts/b", "*.ts")
        assert matches("src/a.ts", "src/*.ts")
        assert matches("src/deep/a.ts", "**/*.ts")

    def test_negated_key_selects_other_extensions(self):
        """Test that a negated glob group applies to every other extension."""
        selector = GlobConfigSelector()
        table = {"!.css": {"style": "eslint"}}

        assert selector.select_for_extension(table, ".ts").style == ShortName("eslint")
        assert selector.select_for_extension(table, ".css") is None

    def test_expand_braces(self):
        """Test brace expansion, including nested groups."""
        assert expand_braces("*.ts") == ["*.ts"]
        assert expand_braces("*.{js,ts}") == ["*.js", "*.ts"]
        assert expand_braces("{a,b{c,d}}") == ["a", "bc", "bd"]
        assert expand_braces("{a}") == ["{a}"]
        assert expand_braces("{a,b") == ["{a,b"]

    def test_split_glob_group(self):
        """Test splitting and trimming of comma-joined glob groups."""
        assert split_glob_group(".js, .jsx,.ts ") == [".js", ".jsx", ".ts"]
        assert split_glob_group("*.{js,ts}, *.mjs") == ["*.{js,ts}", "*.mjs"]
        assert split_glob_group(" , ") == []


class TestGlobConfigSelector:
    """Test suite for GlobConfigSelector class."""

    @pytest.fixture
    def selector(self):
        """Create a GlobConfigSelector instance."""
        return GlobConfigSelector()

    def test_no_match_returns_none(self, selector):
        """Test that an extension matching no key yields None."""
        table = {".js, .ts": {"parser": "babylon"}}

        assert selector.select_for_extension(table, ".css") is None

    def test_empty_table(self, selector):
        """Test selecting from an empty table."""
        assert selector.select_for_extension({}, ".ts") is None

    def test_or_semantics_within_key(self, selector):
        """Test that a key matches if any of its patterns matches."""
        table = {"*.ts, *.tsx": {"parser": "typescript"}}

        assert selector.select_for_extension(table, "file.ts").parser == ShortName("typescript")
        assert selector.select_for_extension(table, "file.tsx").parser == ShortName("typescript")

    def test_matching_keys_merged_in_order(self, selector):
        """Test that all matching fragments are merged, later keys winning."""
        table = {
            ".js, .ts": {"parser": "babylon", "style": "eslint"},
            ".css": {"parser": "postcss"},
            ".ts": {"parser": "typescript", "options": {"strict": True}},
        }

        result = selector.select_for_extension(table, ".ts")

        assert result == ConfigFragment(
            parser=ShortName("typescript"),
            style=ShortName("eslint"),
            options={"strict": True},
        )

    def test_inline_references_parsed(self, selector):
        """Test that inline plugin references in a table are parsed."""
        table = {".ts": {"style": {"module": "renke", "options": {"indent": 4}}}}

        result = selector.select_for_extension(table, ".ts")

        assert result.style == InlineReference("renke", {"indent": 4})

    def test_parsed_fragments_accepted(self, selector):
        """Test that tables may hold already parsed fragments."""
        fragment = ConfigFragment(parser=ShortName("babylon"))

        assert selector.select_for_extension({".js": fragment}, ".js") == fragment

    def test_malformed_fragment_skipped(self, selector):
        """Test that a malformed fragment does not match but others still do."""
        table = {
            ".ts": {"parser": "babylon"},
            "*.ts": "not a fragment",
        }

        assert selector.select_for_extension(table, ".ts") == ConfigFragment(parser=ShortName("babylon"))

    def test_empty_fragment_is_absent(self, selector):
        """Test that a matching fragment without fields counts as no match."""
        assert selector.select_for_extension({".ts": {}}, ".ts") is None

    def test_non_string_keys_ignored(self, selector):
        """Test that keys that are not glob groups never match."""
        assert selector.select_for_extension({42: {"parser": "babylon"}}, ".ts") is None

    def test_custom_matcher(self):
        """Test that the matcher predicate can be replaced."""
        calls = []

        def matcher(candidate, pattern):
            calls.append((candidate, pattern))
            return pattern == "b"

        selector = GlobConfigSelector(matcher=matcher)
        result = selector.select_for_extension({"a, b": {"parser": "babylon"}}, ".ts")

        assert result.parser == ShortName("babylon")
        assert calls == [(".ts", "a"), (".ts", "b")]
