"""
Tests for place derivation and rendering.
"""

import pytest

from lifecycle_logger.formatting.place import BOX_WIDTH, Place, display_name, last_path_component
from lifecycle_logger.formatting.roles import FALLBACK_ICON


class TestLastPathComponent:
    """Test path splitting."""

    def test_posix_path(self):
        assert last_path_component("/Users/dev/App/UserRepository.swift") == "UserRepository.swift"

    def test_windows_path(self):
        assert last_path_component("C:\\src\\app\\UserRepository.swift") == "UserRepository.swift"

    def test_bare_name(self):
        assert last_path_component("UserRepository.swift") == "UserRepository.swift"

    def test_trailing_separator(self):
        assert last_path_component("/src/app/") == "app"

    def test_empty(self):
        assert last_path_component("") == ""


class TestDisplayName:
    """Test file name to display name conversion."""

    def test_single_extension(self):
        assert display_name("/src/UserRepository.swift") == "UserRepository"

    @pytest.mark.parametrize("prefix", ["", "/a/b/", "a/b/", "C:\\a\\b\\", "../x/"])
    def test_secondary_suffix_is_camel_joined(self, prefix):
        """Test that the name does not depend on the preceding path."""
        assert display_name(prefix + "Foo.Bar.baz.swift") == "FooBar"

    def test_lowercase_middle_segment_is_capitalized(self):
        assert display_name("Profile.view.Model.swift") == "ProfileViewModel"

    def test_python_module_name(self):
        assert display_name("/app/services/user_repository.py") == "user_repository"

    def test_no_extension(self):
        assert display_name("/usr/bin/Makefile") == "Makefile"

    def test_lowercase_trailing_segments_are_dropped(self):
        """Test that all-lowercase trailing segments count as extensions."""
        assert display_name("user.repository.swift") == "user"
        assert display_name("Foo.generated.swift") == "Foo"

    def test_empty_segments_are_skipped(self):
        assert display_name("Foo..Bar.swift") == "FooBar"

    def test_hidden_file(self):
        assert display_name("/home/.profile") == "profile"

    def test_empty_path(self):
        assert display_name("") == ""


class TestPlace:
    """Test place rendering."""

    def test_from_path_resolves_icon(self):
        place = Place.from_path("/app/UserRepository.swift")
        assert place.name == "UserRepository"
        assert place.icon == "🗄"
        assert place.label == "UserRepository"

    def test_type_is_parenthesized(self):
        place = Place.from_path("SessionManager.swift", "cache")
        assert place.label == "SessionManager(cache)"

    def test_icon_ignores_type(self):
        place = Place("AppDelegate", "repository")
        assert place.icon == FALLBACK_ICON

    def test_compact(self):
        place = Place("SessionManager", "cache")
        assert place.compact == " 🤖 SessionManager(cache) ==="

    def test_boxed_pads_to_target_column(self):
        place = Place("UserRepository")
        assert place.padding == BOX_WIDTH - (1 + len("UserRepository") + 5)
        assert place.boxed == " 🗄 UserRepository" + " " * 30 + "==="

    def test_boxed_fallback_adjustment(self):
        place = Place("Foo")
        assert place.padding == 40
        assert place.boxed == " === Foo" + " " * 40 + "==="

    def test_boxed_includes_type_in_width(self):
        place = Place("UserRepository", "remote")
        assert place.padding == 30 - len("(remote)")

    @pytest.mark.parametrize("length", [44, 45, 60, 200])
    def test_long_names_keep_one_space(self, length):
        """Test that padding never drops below one space."""
        place = Place("Q" * length)
        assert place.padding >= 1
        assert place.boxed.endswith(" ===")

    def test_padding_clamps_exactly_at_one(self):
        place = Place("Q" * 43)
        assert place.padding == 1
        place = Place("Q" * 42)
        assert place.padding == 1
        place = Place("Q" * 41)
        assert place.padding == 2
