"""Tests for the tokenizer and block flattening."""

from pathlib import Path

import pytest

from just_tcl.ast import Command, Word, WordKind
from just_tcl.errors import ExtraCharacters, UnterminatedBrace
from just_tcl.parser import read_script, split_words

FIXTURES = Path(__file__).parent.parent / "fixtures"


def b(text: str) -> Word:
    """Bare word."""
    return Word(text, WordKind.BARE)


def q(text: str) -> Word:
    """Quoted word."""
    return Word(text, WordKind.QUOTED)


def br(text: str) -> Word:
    """Braced word."""
    return Word(text, WordKind.BRACED)


def cmd(*words: Word) -> Command:
    return Command(tuple(words))


def parse_one(source: str) -> Command:
    script = read_script(source)
    assert len(script) == 1
    return script.commands[0]


class TestWords:
    """Test splitting a command into words."""

    def test_bare_words(self):
        assert split_words("hello world") == [b("hello"), b("world")]
        assert split_words("hello\tworld") == [b("hello"), b("world")]
        assert split_words("hello  \tworld") == [b("hello"), b("world")]

    def test_quoted_word(self):
        assert parse_one('puts "Hello, world"') == cmd(b("puts"), q("Hello, world"))

    def test_empty_quoted_word(self):
        assert parse_one('puts ""') == cmd(b("puts"), q(""))

    def test_quoted_escapes_kept_for_substitution(self):
        assert parse_one(r'puts "Many\\escapes\n\"here\""') == cmd(
            b("puts"), q(r'Many\\escapes\n\"here\"')
        )

    def test_quoted_word_with_braces_and_brackets(self):
        assert parse_one('hello "{[ world ]}"') == cmd(b("hello"), q("{[ world ]}"))

    def test_whole_command_quoted(self):
        assert parse_one('"hello { brackets }"') == cmd(q("hello { brackets }"))

    def test_command_substitution_is_one_word(self):
        assert parse_one("puts [ + 1 2 ]") == cmd(b("puts"), b("[ + 1 2 ]"))

    def test_nested_command_substitution(self):
        assert parse_one("puts [ + [ + 1 1 ] 1 ]") == cmd(b("puts"), b("[ + [ + 1 1 ] 1 ]"))

    def test_substitution_with_regex_word(self):
        assert parse_one(r'set subdir [ replace $version \..* "" ]') == cmd(
            b("set"), b("subdir"), b(r'[ replace $version \..* "" ]')
        )

    def test_bracketed_variable_with_spaces(self):
        assert parse_one("puts ${a complicated name!}") == cmd(
            b("puts"), b("${a complicated name!}")
        )

    def test_mixed_bare_word(self):
        assert parse_one("puts https://example.org/$dir/$name-$v.tar.bz2") == cmd(
            b("puts"), b("https://example.org/$dir/$name-$v.tar.bz2")
        )

    def test_unicode_words(self):
        assert parse_one('puts héllo "wörld ✓"') == cmd(b("puts"), b("héllo"), q("wörld ✓"))

    def test_word_positions(self):
        script = read_script("set x 1\n  puts $x")
        second = script.commands[1]
        assert (second.line, second.column) == (2, 3)
        assert (second.words[1].line, second.words[1].column) == (2, 8)

    def test_extra_characters_after_quote(self):
        with pytest.raises(ExtraCharacters) as info:
            read_script('puts "a"b')
        assert (info.value.line, info.value.column) == (1, 9)

    def test_extra_characters_after_brace(self):
        with pytest.raises(ExtraCharacters):
            read_script("puts {a}b c")

    def test_backslash_newline_separates_words(self):
        assert parse_one("puts a\\\n    b") == cmd(b("puts"), b("a"), b("b"))


class TestBraces:
    """Test literal brace words and block flattening."""

    def test_non_trailing_brace_is_literal(self):
        assert parse_one("proc f {a b} x") == cmd(b("proc"), b("f"), br("a b"), b("x"))

    def test_literal_keeps_content_verbatim(self):
        assert parse_one("set x {$y [z]} w") == cmd(b("set"), b("x"), br("$y [z]"), b("w"))

    def test_trailing_block_is_flattened(self):
        assert parse_one("hello { world }") == cmd(b("hello"), b("world"))
        assert parse_one("hello {world}") == cmd(b("hello"), b("world"))

    def test_flattening_equivalence(self):
        block = parse_one('user "Example User" { uid 1000 gid 1000 shell /bin/zsh }')
        flat = parse_one('user "Example User" uid 1000 gid 1000 shell /bin/zsh')
        assert block == flat

    def test_multiline_block(self):
        expected = cmd(b("demo"), b("hello"), b("world"))
        assert parse_one("demo {\n  hello\n  world\n}") == expected
        assert parse_one("demo {\n  hello world\n}") == expected

    def test_block_commands_are_joined(self):
        assert parse_one("pkg { a 1; b 2\n c 3 }") == cmd(
            b("pkg"), b("a"), b("1"), b("b"), b("2"), b("c"), b("3")
        )

    def test_block_comments_skipped(self):
        assert parse_one("pkg {\n  # the uid\n  uid 1000\n}") == cmd(b("pkg"), b("uid"), b("1000"))

    def test_empty_block(self):
        assert parse_one("pkg {}") == cmd(b("pkg"))

    def test_block_keeps_quoted_and_substitution_words(self):
        assert parse_one('user x { name "A B" home [home x] }') == cmd(
            b("user"), b("x"), b("name"), q("A B"), b("home"), b("[home x]")
        )

    def test_flattening_is_top_level_only(self):
        assert parse_one("outer { inner {x y} z }") == cmd(
            b("outer"), b("inner"), br("x y"), b("z")
        )
        assert parse_one("outer { inner {x y} }") == cmd(b("outer"), b("inner"), br("x y"))

    def test_lone_brace_word_is_not_flattened(self):
        assert parse_one("{a b}") == cmd(br("a b"))

    def test_block_is_remembered(self):
        command = parse_one('user "X" { uid 1000 }')
        assert command.block == br(" uid 1000 ")
        assert command.block_start == 2

    def test_flattened_word_positions(self):
        command = parse_one("user x {\n  uid 1000\n}")
        uid = command.words[2]
        assert (uid.line, uid.column) == (2, 3)

    def test_unterminated_brace_in_block(self):
        with pytest.raises(UnterminatedBrace):
            read_script("user x {\n  uid {1000\n")


class TestPackageDescription:
    """Tokenize a complete package description."""

    def test_pkg_description(self):
        script = read_script((FIXTURES / "pkg.tcl").read_text())
        assert list(script) == [
            cmd(b("set"), b("name"), b("ruby")),
            cmd(b("set"), b("version"), b("2.6.3")),
            cmd(b("set"), b("ruby_abiver"), b("2.6.0")),
            cmd(b("set"), b("subdir"), b('[ replace $version {\\.[0-9]+$} "" ]')),
            cmd(b("pkgname"), b("$name")),
            cmd(b("version"), b("$version")),
            cmd(b("revision"), b("2")),
            cmd(b("build-style"), b("gnu-configure")),
            cmd(
                b("configure_args"),
                b("--enable-shared"),
                b("--disable-rpath"),
                b("DOXYGEN=/usr/bin/doxygen"),
                b("DOT=/usr/bin/dot"),
                b("PKG_CONFIG=/usr/bin/pkg-config"),
            ),
            cmd(b("make_build_args"), b("all"), b("capi")),
            cmd(b("hostmakedepends"), b("pkg-config"), b("bison"), b("groff")),
            cmd(
                b("makedepends"),
                b("zlib-devel"),
                b("readline-devel"),
                b("libffi-devel"),
                b("libressl-devel"),
                b("gdbm-devel"),
                b("libyaml-devel"),
                b("pango-devel"),
            ),
            cmd(b("checkdepends"), b("tzdata")),
            cmd(b("short_desc"), q("Ruby programming language")),
            cmd(b("homepage"), b("http://www.ruby-lang.org/en/")),
            cmd(b("maintainer"), q("Wesley Moore <wes@wezm.net>")),
            cmd(b("license"), b("Ruby"), b("BSD-2-Clause")),
            cmd(
                b("distfile"),
                b("https://cache.ruby-lang.org/pub/ruby/$subdir/$pkgname-$version.tar.bz2"),
                b("checksum"),
                b("dd638bf42059182c1d04af0d5577131d4ce70b79105231c4cc0a60de77b14f2e"),
            ),
        ]
