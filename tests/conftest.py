import pytest

from api_scaffold.errors import PromptError


class ScriptedPrompter:
    """Prompter fake that replays canned answers in order.

    ``choose`` answers are lists of labels, ``text`` answers are strings.
    Running out of answers behaves like a closed stdin.
    """

    def __init__(self, answers):
        self.answers = list(answers)
        self.questions = []

    def choose(self, message, items):
        self.questions.append(message)
        answer = self._next()
        assert isinstance(answer, list), f"expected a selection for {message!r}, got {answer!r}"
        return answer

    def text(self, message, default=None):
        self.questions.append(message)
        answer = self._next()
        assert isinstance(answer, str), f"expected text for {message!r}, got {answer!r}"
        if not answer and default is not None:
            return default
        return answer

    def _next(self):
        if not self.answers:
            raise PromptError("Input aborted while waiting for an answer.")
        return self.answers.pop(0)


@pytest.fixture
def scripted():
    """Factory: ``scripted([...answers])`` -> ScriptedPrompter."""
    return ScriptedPrompter
