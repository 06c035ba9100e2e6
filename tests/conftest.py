"""Shared fixtures for call cost tests."""

import pytest


class ScriptedInput:
    """Stand-in for ``input`` that replays a fixed list of lines."""

    def __init__(self, lines):
        self._lines = list(lines)
        self.prompts = []

    def __call__(self, prompt=""):
        self.prompts.append(prompt)
        if not self._lines:
            raise EOFError
        return self._lines.pop(0)

    @property
    def remaining(self):
        return len(self._lines)


@pytest.fixture
def scripted_input():
    """Factory building a ScriptedInput from lines of user input."""
    return ScriptedInput
