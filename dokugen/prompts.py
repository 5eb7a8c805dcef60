"""Interactive yes/no questions asked while generating a README."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import Callable, Iterable, List, Optional, TextIO

from .errors import PromptInterrupted

_YES = {"y", "yes"}
_NO = {"n", "no"}


class PromptProvider(ABC):
    """Contract for collaborators that answer yes/no questions."""

    @abstractmethod
    def ask_yes_no(self, message: str) -> bool:
        """Return True for yes and False for no."""


class ConsolePrompt(PromptProvider):
    """Asks questions on the terminal until a yes or no answer is given."""

    def __init__(
        self,
        *,
        input_func: Callable[[str], str] = input,
        output: Optional[TextIO] = None,
        default: Optional[bool] = None,
    ) -> None:
        self._input = input_func
        self._output = output
        self.default = default

    def ask_yes_no(self, message: str) -> bool:
        suffix = {True: "[Y/n]", False: "[y/N]", None: "[y/n]"}[self.default]
        while True:
            try:
                answer = self._input(f"{message} {suffix} ").strip().lower()
            except (EOFError, KeyboardInterrupt) as exc:
                raise PromptInterrupted("User force closed the prompt") from exc
            if not answer and self.default is not None:
                return self.default
            if answer in _YES:
                return True
            if answer in _NO:
                return False
            print("Please answer yes or no.", file=self._output or sys.stdout)


class StaticPrompt(PromptProvider):
    """Replays canned answers; useful for --yes runs and tests."""

    def __init__(self, answers: Iterable[bool] | bool = True) -> None:
        if isinstance(answers, bool):
            self._fixed: Optional[bool] = answers
            self._queue: List[bool] = []
        else:
            self._fixed = None
            self._queue = list(answers)
        self.asked: List[str] = []

    def ask_yes_no(self, message: str) -> bool:
        self.asked.append(message)
        if self._fixed is not None:
            return self._fixed
        if not self._queue:
            raise PromptInterrupted(f"No answer queued for: {message}")
        return self._queue.pop(0)


__all__ = ["ConsolePrompt", "PromptProvider", "StaticPrompt"]
