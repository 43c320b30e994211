"""
Unit tests for assembling and rendering the compilation unit
"""

import random

import pytest

from codegen import generate_code, UnitAssembler, collect_locales
from codegen.errors import CodeGenError, DuplicateMethodName, InconsistentKeyName
from codegen.scala_ast import Object, Match
from models.key import Key, KeyName

GREETING_UNIT = '''package dk.undo.i18n

sealed trait Cardinality

object Cardinality {
  case object Singular extends Cardinality

  case object Plural extends Cardinality
}

sealed trait Locale

object Locale {
  case object Da extends Locale

  case object En extends Locale
}

object I18n {
  // greeting
  def greeting(name: String)(implicit locale: Locale): String = {
    locale match {
      case Locale.Da => {
        s"""Hej ${name}"""
      }
      case Locale.En => {
        s"""Hello ${name}"""
      }
    }
  }
}
'''


@pytest.fixture
def sample_keys(make_key, plural_payload):
    return [
        make_key("greeting", {"en": "Hello [%s:name]", "da": "Hej [%s:name]"}, key_id=1),
        make_key("apples", {
            "en": plural_payload("One apple", "[%i:count] apples"),
            "da": plural_payload("Et æble", "[%i:count] æbler"),
        }, is_plural=True, key_id=2),
        make_key("profile.title", {"en": "Profile of [%s:user_name]\nby [%s:author]", "da": "Profil"}, key_id=3),
        make_key("type", {"en": "Type", "da": "Type"}, key_id=4),
    ]


class TestGenerateCode:
    def test_end_to_end_greeting(self, make_key):
        key = make_key("greeting", {"en": "Hello [%s:name]", "da": "Hej [%s:name]"})
        assert generate_code([key]) == GREETING_UNIT

    def test_idempotent(self, sample_keys):
        assert generate_code(sample_keys) == generate_code(sample_keys)

    def test_input_order_does_not_matter(self, sample_keys):
        expected = generate_code(sample_keys)
        rng = random.Random(1234)
        for _ in range(5):
            shuffled = []
            for key in rng.sample(sample_keys, len(sample_keys)):
                translations = rng.sample(key.translations, len(key.translations))
                shuffled.append(Key(key.key_id, key.key_name, key.is_plural, translations))
            assert generate_code(shuffled) == expected

    def test_methods_sorted_by_name(self, sample_keys):
        code = generate_code(sample_keys)
        positions = [code.index(f"def {name}") for name in ["apples", "greeting", "profileTitle", "`type`"]]
        assert positions == sorted(positions)

    def test_keyword_key_is_quoted(self, sample_keys):
        code = generate_code(sample_keys)
        assert "def `type`(implicit locale: Locale): String = {" in code
        assert "def type(" not in code

    def test_multi_line_translation(self, sample_keys):
        code = generate_code(sample_keys)
        assert 's"""Profile of ${userName}\nby ${author}"""' in code
        assert "def profileTitle(author: String, userName: String)(implicit locale: Locale)" in code
        # Danish text has no markers, so it stays a raw literal
        assert '"""Profil"""' in code

    def test_custom_package_and_container(self, make_key):
        code = generate_code([make_key("ok", {"en": "OK"})], package="com.example.texts", container="Texts")
        assert code.startswith("package com.example.texts\n")
        assert "object Texts {" in code

    def test_empty_input(self):
        code = generate_code([])
        assert "object Locale\n" in code
        assert code.endswith("object I18n\n")


class TestFailures:
    def test_inconsistent_name_aborts_run(self, sample_keys, make_key):
        bad = make_key(
            "farewell", {"en": "Bye", "da": "Farvel"}, key_id=9,
            key_name=KeyName(ios="farewell", android="goodbye", web="farewell", other="farewell")
        )
        with pytest.raises(InconsistentKeyName):
            generate_code(sample_keys + [bad])

    def test_locale_seen_only_in_another_key(self, make_key):
        keys = [
            make_key("a", {"en": "A", "da": "A"}, key_id=1),
            make_key("b", {"en": "B", "da": "B", "sv": "B"}, key_id=2),
        ]
        with pytest.raises(CodeGenError) as exc_info:
            generate_code(keys)
        assert "sv" in str(exc_info.value)

    def test_duplicate_method_names(self, make_key):
        keys = [
            make_key("user_name", {"en": "a"}, key_id=1),
            make_key("user.name", {"en": "b"}, key_id=2),
        ]
        with pytest.raises(DuplicateMethodName):
            generate_code(keys)

    def test_locales_with_same_case_object(self, make_key):
        key = make_key("x", {"en_US": "x", "en-US": "y"})
        with pytest.raises(CodeGenError):
            generate_code([key])


class TestProjects:
    def test_collect_locales(self, make_key):
        projects = {
            "A": [make_key("a", {"en": "a", "da": "a"})],
            "B": [make_key("b", {"sv": "b"})],
        }
        assert collect_locales(projects) == ["da", "en", "sv"]

    def test_single_project_methods_are_direct(self, make_key):
        unit = UnitAssembler().build({"Undo": [make_key("a", {"en": "a"})]})
        container = unit.items[-1]
        assert container.name == "I18n"
        assert container.items == ()
        assert [m.name.name for m in container.methods] == ["a"]

    def test_nested_per_project(self, make_key):
        unit = UnitAssembler().build({
            "web app": [make_key("title", {"en": "Web"})],
            "Admin": [make_key("title", {"en": "Admin"})],
        })
        container = unit.items[-1]
        assert isinstance(container, Object)
        assert container.methods == ()
        assert [o.name for o in container.items] == ["Admin", "WebApp"]
        for project in container.items:
            assert [m.name.name for m in project.methods] == ["title"]
            assert isinstance(project.methods[0].body, Match)

    def test_nested_rendering(self, make_key):
        code = generate_code({
            "Undo": [make_key("ok", {"en": "OK"})],
            "Admin": [make_key("no", {"en": "No"})],
        })
        assert "object I18n {\n  object Admin {\n    // no\n    def no(implicit locale: Locale)" in code
        assert "  }\n\n  object Undo {\n" in code

    def test_project_names_that_are_not_identifiers_are_quoted(self, make_key):
        code = generate_code({
            "2024 App": [make_key("title", {"en": "New"})],
            "Undo": [make_key("title", {"en": "Old"})],
        })
        assert "object 2024App {" not in code
        assert "  object `2024App` {\n" in code
        assert "  object Undo {\n" in code

    def test_locale_names_that_are_not_identifiers_are_quoted(self, make_key):
        code = generate_code([make_key("hello", {"419": "Hola", "en": "Hello"})])
        assert "  case object `419` extends Locale" in code
        assert "case Locale.`419` => {" in code
        assert "case Locale.En => {" in code
