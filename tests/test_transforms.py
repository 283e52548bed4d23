"""Tests for the named text transforms."""
import random
import string

import pytest

from rig.template import transforms
from rig.template.transforms import Transform, apply

W = "Fabulous Is Rust"


class TestTransformNames:
    """Test name and synonym resolution."""

    @pytest.mark.parametrize("name,expected", [
        ("lower", Transform.LOWER),
        ("lowercase", Transform.LOWER),
        ("cap", Transform.CAPITALIZE),
        ("Camel", Transform.UPPER_CAMEL),
        ("pascal", Transform.UPPER_CAMEL),
        ("camel", Transform.LOWER_CAMEL),
        ("package-dir", Transform.PATH_SEGMENTS),
        ("generate-random", Transform.ADD_RANDOM),
        (" upper ", Transform.UPPER),
    ])
    def test_synonyms(self, name, expected):
        assert Transform.from_name(name) is expected

    def test_unknown_name_is_identity(self):
        assert Transform.from_name("no-such-transform") is Transform.IDENTITY
        assert apply("no-such-transform", W) == W

    def test_names_lists_synonyms(self):
        assert Transform.SNAKE_CASE.names == ["snake", "snake-case"]


class TestTransforms:
    """Test each transform on a sample sentence."""

    def test_lower_case(self):
        assert apply("lower", W) == "fabulous is rust"

    def test_upper_case(self):
        assert apply("upper", W) == "FABULOUS IS RUST"

    def test_capitalize(self):
        assert apply("cap", W.lower()) == "Fabulous is rust"
        assert apply("cap", "") == ""

    def test_decapitalize(self):
        assert apply("decap", W) == "fabulous Is Rust"

    def test_start_case(self):
        assert apply("start", W.lower()) == W
        assert apply("start", "  many   spaces here ") == "Many Spaces Here"

    def test_word_only(self):
        includes_ctrls = "_!$what'is-this@charac#ters??"
        assert apply("word", includes_ctrls) == "_whatisthischaracters"

    def test_word_only_drops_non_ascii(self):
        assert apply("word", "café_1") == "caf_1"

    def test_hyphenate(self):
        assert apply("hyphen", W) == "Fabulous-Is-Rust"
        assert apply("hyphen", "a   b\tc") == "a-b-c"

    def test_upper_camel(self):
        assert apply("Camel", W) == "FabulousIsRust"

    def test_lower_camel(self):
        assert apply("camel", W) == "fabulousIsRust"

    def test_camel_single_word_keeps_case(self):
        assert apply("Camel", "my-App") == "myApp"
        assert apply("camel", "Hello") == "Hello"

    def test_camel_only_spaces(self):
        assert apply("Camel", "   ") == ""

    def test_normalize(self):
        assert apply("norm", W) == "fabulous-is-rust"

    def test_snake_case(self):
        assert apply("snake", W) == "Fabulous_Is_Rust"
        assert apply("snake", "my..app--name  here") == "my.app-name_here"

    def test_directory_path(self):
        assert apply("packaged", "path.to.my.directory") == "path/to/my/directory"
        assert apply("packaged", "com..example") == "com/example"

    def test_directory_path_is_relative(self):
        assert apply("packaged", ".evil.pkg") == "evil/pkg"
        assert apply("packaged", "com.example.") == "com/example"

    def test_identity(self):
        assert apply(Transform.IDENTITY, W) == W


class TestAddRandom:
    """Test random suffix generation."""

    def test_add_random(self):
        added = apply("random", W)
        assert len(added) == len(W) + 33  # 32 random chars + '-'
        assert added.startswith(W + "-")
        for c in added[len(W) + 1:]:
            assert c in string.ascii_letters + string.digits

    def test_seeded_source_is_reproducible(self):
        first = apply(Transform.ADD_RANDOM, "x", random.Random(7))
        second = apply(Transform.ADD_RANDOM, "x", random.Random(7))
        assert first == second

    def test_unseeded_calls_differ(self):
        assert transforms.add_random("x") != transforms.add_random("x")
