# tests/fakes.py

from __future__ import annotations

from collections.abc import Iterable


class ScriptedConsole:
    """
    Deterministic console for loop tests.

    - `read_line` returns the scripted answers in order, then raises EOFError
    - `write` records every output chunk
    - prompts are captured for assertions
    """

    def __init__(self, answers: Iterable[str | None]) -> None:
        self._answers = list(answers)
        self.prompts: list[str] = []
        self.output: list[str] = []

    def read_line(self, prompt: str = "") -> str:
        self.prompts.append(prompt)
        if not self._answers:
            raise EOFError
        answer = self._answers.pop(0)
        # None stands for "no value" from the input source.
        return answer if answer is not None else ""

    def write(self, text: str = "") -> None:
        self.output.append(text)

    @property
    def text(self) -> str:
        return "\n".join(self.output)

    @property
    def remaining(self) -> int:
        return len(self._answers)


class FakeSleeper:
    def __init__(self) -> None:
        self.calls: list[float] = []

    def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)
