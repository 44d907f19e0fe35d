import io

import pytest

from core.errors import InputReadError, QuitRequested
from core.services.prompt_loop import PromptHooks, prompt_until_valid


def _int_parser(calls):
    def parse(text: str) -> int:
        calls.append(text)
        return int(text)

    return parse


def test_returns_first_valid_answer(lines):
    calls = []

    result = prompt_until_valid("n?", _int_parser(calls), error_message="bad", source=lines("7"))

    assert result == 7
    assert calls == ["7"]


def test_invalid_answers_reprompt(lines):
    prompts, errors = [], []
    hooks = PromptHooks(
        show_prompt=lambda quit_token, message: prompts.append((quit_token, message)),
        show_invalid=errors.append,
    )

    result = prompt_until_valid(
        "n?", int, error_message="need a number", hooks=hooks, source=lines("x", "", "12")
    )

    assert result == 12
    assert prompts == [("quit", "n?")] * 3
    assert errors == ["need a number", "need a number"]


@pytest.mark.parametrize("answer", ["quit", "QUIT", "  Quit\t"])
def test_quit_checked_before_parsing(answer):
    calls = []

    with pytest.raises(QuitRequested):
        prompt_until_valid("n?", _int_parser(calls), error_message="bad", source=io.StringIO(f"{answer}\n"))

    assert calls == []


def test_quit_after_invalid_answer(lines):
    errors = []
    hooks = PromptHooks(show_invalid=errors.append)

    with pytest.raises(QuitRequested):
        prompt_until_valid("n?", int, error_message="bad", hooks=hooks, source=lines("x", "quit"))

    assert errors == ["bad"]


def test_custom_quit_token(lines):
    with pytest.raises(QuitRequested):
        prompt_until_valid("n?", int, error_message="bad", source=lines("exit"), quit_token="exit")


def test_quit_word_parses_when_token_differs(lines):
    assert prompt_until_valid("?", str.upper, error_message="bad", source=lines("quit"), quit_token="exit") == "QUIT"


def test_read_failure_propagates_without_retry(lines):
    errors = []
    hooks = PromptHooks(show_invalid=errors.append)

    with pytest.raises(InputReadError):
        prompt_until_valid("n?", int, error_message="bad", hooks=hooks, source=lines("x"))

    assert errors == ["bad"]


def test_parser_errors_other_than_value_error_propagate(lines):
    def boom(text: str) -> int:
        raise KeyError(text)

    with pytest.raises(KeyError):
        prompt_until_valid("n?", boom, error_message="bad", source=lines("1"))
