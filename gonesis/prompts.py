"""Interactive prompts that build a ``ScaffoldRequest``.

Each question prints a prompt on the shared console and reads exactly one
line from the input stream.  Nothing here retries: an invalid project name
raises immediately.
"""

from __future__ import annotations

import sys
from typing import TextIO

from rich.console import Console

from gonesis.config import Config
from gonesis.errors import InvalidProjectNameError
from gonesis.scaffolder.generator import ScaffoldRequest
from gonesis.utils import console as default_console
from gonesis.utils import is_valid_project_name, strip_newline

AFFIRMATIVE_ANSWERS = frozenset({"y", "yes"})


def validate_project_name(raw: str) -> str:
    """Strip one trailing newline from *raw* and return it if it is a valid name.

    Raises:
        InvalidProjectNameError: If the name is empty or contains anything
            other than ASCII letters, digits, ``_`` and ``-``.
    """
    name = strip_newline(raw)
    if not is_valid_project_name(name):
        raise InvalidProjectNameError(name)
    return name


def is_affirmative(answer: str, empty_is_yes: bool = True) -> bool:
    """Interpret a yes/no answer.  ``y`` and ``yes`` in any case are true."""
    answer = strip_newline(answer).lower()
    if answer == "":
        return empty_is_yes
    return answer in AFFIRMATIVE_ANSWERS


class Prompter:
    """Asks the scaffolding questions on a console and reads the answers.

    Attributes:
        config: Run configuration (folder plan, yes/no semantics).
        stream: Where answers are read from, ``sys.stdin`` by default.
        console: Where prompts are printed.
    """

    def __init__(
        self,
        config: Config,
        stream: TextIO | None = None,
        console: Console | None = None,
    ) -> None:
        self.config = config
        self.stream = stream if stream is not None else sys.stdin
        self.console = console if console is not None else default_console

    def read_line(self, prompt: str) -> str:
        """Print *prompt* without a newline and return the next input line."""
        self.console.print(prompt, end="", markup=False, highlight=False, soft_wrap=True)
        return self.stream.readline()

    def ask_project_name(self) -> str:
        return validate_project_name(self.read_line("Name of the project: "))

    def ask_description(self) -> str:
        return strip_newline(self.read_line("Project description: "))

    def ask_account_handle(self) -> str:
        return strip_newline(self.read_line("Github username: "))

    def ask_yes_no(self, question: str) -> bool:
        answer = self.read_line(f"[ ? ] {question} ")
        return is_affirmative(answer, empty_is_yes=self.config.empty_answer_is_yes)

    def collect(self) -> ScaffoldRequest:
        """Ask every question in order and freeze the answers.

        The order is: project name, description, account handle, then one
        yes/no question per optional folder of the configured plan.
        """
        name = self.ask_project_name()
        description = self.ask_description()
        handle = self.ask_account_handle()
        features = {
            folder: self.ask_yes_no(question)
            for folder, question in self.config.plan.optional.items()
        }
        return ScaffoldRequest(
            project_name=name,
            description=description,
            account_handle=handle,
            features=features,
        )
