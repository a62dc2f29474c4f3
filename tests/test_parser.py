"""Tests for the documentation header parser."""

import pytest

from better_help.docs import Section, parse, parse_file


class TestSections:
    @pytest.mark.parametrize(
        "line,expected",
        [
            ("Commands:", Section.COMMANDS),
            ("commands", Section.COMMANDS),
            ("DESCRIPTION:", Section.DESCRIPTION),
            ("Authors:", Section.AUTHOR),
            ("Urls", Section.URLS),
            ("Commands: list", None),
            ("hubot help - shows help", None),
        ],
    )
    def test_from_header(self, line, expected):
        assert Section.from_header(line) is expected


class TestParse:
    def test_commands_section(self):
        record = parse("// Commands:\n// hubot foo - does foo\n// hubot bar - does bar")
        assert record.commands == ("hubot foo - does foo", "hubot bar - does bar")
        for section in Section:
            if section is not Section.COMMANDS:
                assert record.get(section) is None

    def test_all_sections(self):
        text = "\n".join(
            [
                "# Description:",
                "#   Create hangouts with Hubot.",
                "#",
                "# Dependencies:",
                '#   "googleapis": "1.0.0"',
                "# Configuration:",
                "#   HUBOT_GOOGLE_HANGOUTS_DOMAIN",
                "# Commands:",
                "#   hubot hangout me <title> - Creates a Hangout",
                "# Notes:",
                "#   Needs a domain",
                "# Examples:",
                "#   hubot hangout me standup",
                "# Tags:",
                "#   video",
                "# URLs:",
                "#   https://hangouts.google.com",
                "# Author:",
                "#   iangreenleaf",
            ]
        )
        record = parse(text)
        assert record.description == ("Create hangouts with Hubot.",)
        assert record.dependencies == ('"googleapis": "1.0.0"',)
        assert record.configuration == ("HUBOT_GOOGLE_HANGOUTS_DOMAIN",)
        assert record.commands == ("hubot hangout me <title> - Creates a Hangout",)
        assert record.notes == ("Needs a domain",)
        assert record.examples == ("hubot hangout me standup",)
        assert record.tags == ("video",)
        assert record.urls == ("https://hangouts.google.com",)
        assert record.author == ("iangreenleaf",)

    def test_authors_header_fills_author(self):
        record = parse("# Authors:\n#   alice\n#   bob\n")
        assert record.author == ("alice", "bob")

    def test_none_and_blank_lines_are_skipped(self):
        record = parse("# Dependencies:\n#   None\n#\n# Commands:\n#   hubot x - y\n")
        assert record.dependencies is None
        assert record.commands == ("hubot x - y",)

    def test_header_block_stops_at_first_code_line(self):
        text = "# Commands:\n#   hubot a - first\n\n# hubot b - after the block\n"
        assert parse(text).commands == ("hubot a - first",)

    def test_lines_before_first_section_are_discarded(self):
        record = parse("# Some preamble\n# Description:\n#   Real description\n")
        assert record.description == ("Real description",)
        assert record.commands is None

    def test_repeated_header_replaces_earlier_lines(self):
        record = parse("# Commands:\n#   hubot a - a\n# Notes:\n#   n\n# Commands:\n#   hubot b - b\n")
        assert record.commands == ("hubot b - b",)
        assert record.notes == ("n",)

    def test_header_without_lines_is_absent(self):
        record = parse("# Description:\n# Configuration:\n# Commands:\n#   hubot a - a\n")
        assert record.description is None
        assert record.configuration is None

    def test_fallback_without_section_headers(self):
        record = parse("// hubot open the <text> doors - opens most of the doors.\n")
        assert record.commands == ("hubot open the <text> doors - opens most of the doors.",)

    def test_fallback_keeps_only_hyphenated_lines(self):
        text = "# Pugme is the most important thing\n# hubot pug me - Receive a pug\n#\nrequire 'x'\n"
        assert parse(text).commands == ("hubot pug me - Receive a pug",)

    def test_fallback_not_used_when_any_section_found(self):
        record = parse("# Description:\n#   Doors\n# hubot open - opens\n")
        assert record.description == ("Doors", "hubot open - opens")
        assert record.commands is None

    def test_no_header(self):
        record = parse("module.exports = (robot) ->\n  robot.hear /x/, ->\n")
        assert record.is_empty()

    def test_empty_text(self):
        assert parse("").is_empty()

    def test_windows_line_endings(self):
        record = parse("# Commands:\r\n#   hubot a - a\r\n")
        assert record.commands == ("hubot a - a",)


class TestParseFile:
    def test_reads_file(self, tmp_path):
        script = tmp_path / "ping.py"
        script.write_text("# Commands:\n#   hubot ping - Reply with pong\n\nimport re\n", encoding="utf-8")
        assert parse_file(script).commands == ("hubot ping - Reply with pong",)

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(OSError):
            parse_file(tmp_path / "missing.js")
