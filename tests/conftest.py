"""Pytest configuration and fixtures for better-help tests."""

import json
import textwrap
from pathlib import Path

import pytest

from better_help.help.service import HelpService

HANGOUTS = """\
# Description:
#   Create hangouts with Hubot.
#
# Dependencies:
#   None
#
# Configuration:
#   HUBOT_GOOGLE_HANGOUTS_DOMAIN
#
# Commands:
#   hubot hangout me <title> - Creates a Hangout with the given title and returns the URL.
#
# Author:
#   iangreenleaf

module.exports = (robot) ->
  robot.respond /hangout me\\s*"?(.*?)"?$/i, (msg) ->
    msg.send "ok"
"""

EXAMPLE = """\
// Description:
//   Example scripts for you to examine and try out.
//
// Notes:
//   They are commented out by default, because most of them are pretty silly.
//
// Commands:
//   hubot open the <text> doors - opens most of the doors.

module.exports = (robot) => {}
"""

HELP = """\
// Description:
//   A more helpful help command.
//
// Commands:
//   hubot help - The friendly help prompt

module.exports = (robot) => {}
"""

MEME = """\
# Description:
#   Get a meme from http://memecaptain.com/
#
# Commands:
#   hubot Brace yourself <text> - Meme: Ned Stark braces for <text>
#   hubot ONE DOES NOT SIMPLY <text> - Meme: Boromir
#
# Author:
#   bobanj
"""

MEME_EXTRA = """\
# Description:
#   Get a meme from http://memecaptain.com/
#
# Commands:
#   hubot ONE DOES NOT SIMPLY <text> - Meme: Boromir
#   hubot Y U NO <text> - Meme: Y U NO GUY w/ bottom caption
#
# Authors:
#   cycomachead
"""

MEME_INDEX = """\
fs = require 'fs'
path = require 'path'

module.exports = (robot, scripts) ->
  scriptsPath = path.resolve(__dirname, 'src')
"""

BAD_MODULE = """\
// hubot open the <text> doors - opens most of the doors.
// hubot close the doors - closes all of the doors.
// This module does not follow the standard layout

module.exports = (robot) => {}
"""


def write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(textwrap.dedent(text), encoding="utf-8")
    return path


@pytest.fixture
def bot_dir(tmp_path):
    """Bot directory with local scripts and one external package."""
    write(tmp_path / "scripts" / "hangouts.coffee", HANGOUTS)
    write(tmp_path / "scripts" / "help.js", HELP)
    write(tmp_path / "scripts" / "README.md", "# Not a script\n")
    write(tmp_path / "src" / "scripts" / "example.js", EXAMPLE)
    write(tmp_path / "node_modules" / "hubot-meme" / "index.coffee", MEME_INDEX)
    write(tmp_path / "node_modules" / "hubot-meme" / "src" / "meme.coffee", MEME)
    write(tmp_path / "node_modules" / "hubot-meme" / "src" / "meme-extra.coffee", MEME_EXTRA)
    (tmp_path / "external-scripts.json").write_text(json.dumps(["hubot-meme"]), encoding="utf-8")
    return tmp_path


@pytest.fixture
def bad_module_dir(tmp_path):
    """Bot directory whose only external package has no scripts directory."""
    package = tmp_path / "node_modules" / "bad-module"
    write(package / "package.json", json.dumps({"name": "bad-module", "main": "lib/doors"}))
    write(package / "lib" / "doors.js", BAD_MODULE)
    (tmp_path / "external-scripts.json").write_text(json.dumps(["bad-module"]), encoding="utf-8")
    return tmp_path


@pytest.fixture
def help_env(bot_dir, monkeypatch):
    """Point the help service at bot_dir with a fresh snapshot."""
    monkeypatch.setenv("BETTER_HELP_CWD", str(bot_dir))
    monkeypatch.setenv("BETTER_HELP_ROBOT_NAME", "hal")
    monkeypatch.delenv("BETTER_HELP_ROBOT_ALIAS", raising=False)
    HelpService.reset()
    yield bot_dir
    HelpService.reset()
