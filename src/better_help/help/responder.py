"""User-facing help replies.

Renders the corpus and command search results as chat replies. Command
strings are documented with the generic ``hubot`` invocation name, which
is replaced by the configured robot name before display.
"""

import re
from dataclasses import dataclass
from typing import Iterable, Optional

from better_help.docs.loader import Corpus
from better_help.search.engine import SearchIndex

GENERIC_NAME = re.compile(r"^hubot", re.IGNORECASE)

# The help script's own entry is left out of the overview
HELP_SCRIPT = "help"


@dataclass(frozen=True)
class HelpReply:
    """A rendered reply.

    Attributes:
        action: What was answered: overview, all, script, search,
            not_found, catch_all or catch_all_empty
        text: Reply text (markdown)
        commands: Command strings listed in the reply
    """

    action: str
    text: str
    commands: tuple[str, ...] = ()


class HelpResponder:
    """Answers help requests from a corpus and its search index.

    Usage:
        >>> responder = HelpResponder(corpus, build(corpus), robot_name="hal")
        >>> print(responder.respond("all").text)
        Here's a list of all the things I can do:
        ...
    """

    def __init__(
        self,
        corpus: Corpus,
        index: SearchIndex,
        robot_name: str = "hubot",
        robot_alias: Optional[str] = None,
        catch_all_limit: int = 5,
    ) -> None:
        self.corpus = corpus
        self.index = index
        self.robot_name = robot_name
        self.robot_alias = robot_alias
        self.catch_all_limit = catch_all_limit

        names = [re.escape(robot_name)]
        if robot_alias:
            names.append(re.escape(robot_alias))
        self._addressed = re.compile(r"^@?(?:" + "|".join(names) + r") ", re.IGNORECASE)

    def rename(self, commands: Iterable[str]) -> list[str]:
        """Replace the generic ``hubot`` prefix with the robot name."""
        return [GENERIC_NAME.sub(lambda _: self.robot_name, command, count=1) for command in commands]

    def _describe(self, text: str) -> str:
        return text.replace("hubot", self.robot_name, 1)

    @staticmethod
    def _bullets(commands: Iterable[str]) -> str:
        return "  \n".join("* " + command for command in commands)

    def respond(self, query: Optional[str]) -> HelpReply:
        """Answer ``<robot> help [query]``.

        An empty query or one starting with ``me`` lists the scripts,
        ``all`` lists every command, a script name shows that script's
        commands, anything else is searched.
        """
        raw = (query or "").strip()
        if not raw or raw == "me" or raw.startswith("me "):
            return self.overview()

        key = raw.lower()
        if key == "all":
            return self.all_commands()

        reply = self.script_help(key)
        if reply is not None:
            return reply
        return self.search_reply(raw)

    def overview(self) -> HelpReply:
        lines = ["I can do a lot of things!  Which would you like to know more about? You can say:  ", ""]
        for key, record in self.corpus.items():
            if key == HELP_SCRIPT or not record.commands:
                continue
            lines.append(f"* {self.robot_name} help {key} - {self._describe(record.first_description())}  ")
        lines.extend(["", f"\nOr you can see all commands by typing `{self.robot_name} help all`."])
        return HelpReply(action="overview", text="\n".join(lines))

    def all_commands(self) -> HelpReply:
        commands = self.rename(
            command for record in self.corpus.values() for command in (record.commands or ())
        )
        text = "Here's a list of all the things I can do:  \n\n" + self._bullets(commands)
        return HelpReply(action="all", text=text, commands=tuple(commands))

    def script_help(self, key: str) -> Optional[HelpReply]:
        """Describe one script, or None if it is unknown or has no commands."""
        record = self.corpus.get(key)
        if record is None or not record.commands:
            return None
        commands = self.rename(sorted(record.commands))
        text = self._describe(record.first_description()) + "  \n\n" + self._bullets(commands)
        return HelpReply(action="script", text=text, commands=tuple(commands))

    def search_reply(self, query: str) -> HelpReply:
        matches = self.index.search(query)
        if not matches:
            return HelpReply(
                action="not_found",
                text=f"Sorry!  I couldn't find anything related to {query}",
            )
        commands = self.rename(matches)
        text = f'Here\'s what I can do related to "{query}":  \n\n' + self._bullets(commands)
        return HelpReply(action="search", text=text, commands=tuple(commands))

    def catch_all(self, message: str) -> Optional[HelpReply]:
        """Suggest commands for a message addressed to the robot that no
        script handled.

        Returns:
            HelpReply, or None if the message does not start with the
            robot's name or alias
        """
        if not self._addressed.match(message):
            return None

        matches = self.index.search(self._addressed.sub("", message, count=1))
        if not matches:
            return HelpReply(
                action="catch_all_empty",
                text=f"Sorry, I didn't catch that.  Try `{self.robot_name} help`",
            )
        commands = self.rename(matches[: self.catch_all_limit])
        lines = ["Sorry, I didn't catch that.  Try one of these?"]
        lines.extend("* " + command for command in commands)
        return HelpReply(action="catch_all", text="\n".join(lines), commands=tuple(commands))
