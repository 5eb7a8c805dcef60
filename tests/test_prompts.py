"""Tests for dokugen.prompts."""

from __future__ import annotations

import io

import pytest

from dokugen.errors import PromptInterrupted
from dokugen.prompts import ConsolePrompt, StaticPrompt


def _scripted(*answers: str):
    queue = list(answers)
    asked: list[str] = []

    def _input(message: str) -> str:
        asked.append(message)
        return queue.pop(0)

    return _input, asked


def test_console_prompt_accepts_yes_and_no() -> None:
    input_func, _ = _scripted("Yes", "n")
    prompt = ConsolePrompt(input_func=input_func)

    assert prompt.ask_yes_no("Continue?") is True
    assert prompt.ask_yes_no("Continue?") is False


def test_console_prompt_reasks_until_answered() -> None:
    input_func, asked = _scripted("maybe", "", "y")
    output = io.StringIO()
    prompt = ConsolePrompt(input_func=input_func, output=output)

    assert prompt.ask_yes_no("Overwrite?") is True
    assert len(asked) == 3
    assert asked[0] == "Overwrite? [y/n] "
    assert output.getvalue().count("Please answer yes or no.") == 2


def test_console_prompt_default_on_empty_answer() -> None:
    input_func, asked = _scripted("")
    prompt = ConsolePrompt(input_func=input_func, default=False)

    assert prompt.ask_yes_no("Overwrite?") is False
    assert asked == ["Overwrite? [y/N] "]


@pytest.mark.parametrize("error", [EOFError, KeyboardInterrupt])
def test_console_prompt_interruptions(error) -> None:
    def _input(message: str) -> str:
        raise error

    with pytest.raises(PromptInterrupted, match="force closed"):
        ConsolePrompt(input_func=_input).ask_yes_no("Overwrite?")


def test_static_prompt_replays_answers_in_order() -> None:
    prompt = StaticPrompt([True, False])

    assert prompt.ask_yes_no("first") is True
    assert prompt.ask_yes_no("second") is False
    assert prompt.asked == ["first", "second"]
    with pytest.raises(PromptInterrupted):
        prompt.ask_yes_no("third")


def test_static_prompt_fixed_answer() -> None:
    prompt = StaticPrompt(False)

    assert prompt.ask_yes_no("a") is False
    assert prompt.ask_yes_no("b") is False
