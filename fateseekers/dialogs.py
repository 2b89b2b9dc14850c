"""Answer input and prompt dialogs: their text, input and button callbacks."""

from __future__ import annotations

from typing import Callable, Optional

from fateseekers.widgets import limit_input

MAX_INPUT_SYMBOLS = 20

SOLVE_TEXT_KEY = "answerinput.solvetext"
ENTER_TEXT_KEY = "answerinput.entertext"
ANSWER_SUBMIT_KEY = "answerinput.submit"
ANSWER_CLOSE_KEY = "answerinput.close"

PROMPT_SUBMIT_KEY = "prompt.submit"
PROMPT_CLOSE_KEY = "prompt.close"

Translate = Callable[[str], str]


class AnswerInputComponent:
    """Dialog asking the player to type the answer to a question."""

    def __init__(self, translate: Translate) -> None:
        self._translate = translate
        self._text = ""
        self._input_text = ""
        self._submit_callback: Optional[Callable[[str], None]] = None
        self._close_callback: Optional[Callable[[], None]] = None
        self.placeholder = translate(ENTER_TEXT_KEY)
        self.submit_label = translate(ANSWER_SUBMIT_KEY)
        self.close_label = translate(ANSWER_CLOSE_KEY)

    @property
    def text(self) -> str:
        """The question line shown above the input."""
        return self._text

    @property
    def input_text(self) -> str:
        """What the player has typed so far."""
        return self._input_text

    def set_text(self, value: str) -> None:
        """Show the given question after the translated solve label."""
        self._text = f"{self._translate(SOLVE_TEXT_KEY)}:   {value}"

    def set_submit_callback(self, callback: Callable[[str], None]) -> None:
        self._submit_callback = callback

    def set_close_callback(self, callback: Callable[[], None]) -> None:
        self._close_callback = callback

    def type_text(self, proposed: str) -> str:
        """Apply a change of the input text and return the text kept."""
        self._input_text = limit_input(self._input_text, proposed, MAX_INPUT_SYMBOLS)
        return self._input_text

    def submit(self) -> None:
        """Press the submit button: pass the typed text to the submit callback."""
        if self._submit_callback is None:
            raise RuntimeError("no submit callback is set")
        self._submit_callback(self._input_text)

    def close(self) -> None:
        """Press the close button."""
        if self._close_callback is None:
            raise RuntimeError("no close callback is set")
        self._close_callback()


class PromptComponent:
    """Dialog showing a statement with submit and close buttons."""

    def __init__(self, translate: Translate) -> None:
        self._text = ""
        self._submit_callback: Optional[Callable[[], None]] = None
        self._close_callback: Optional[Callable[[], None]] = None
        self.submit_label = translate(PROMPT_SUBMIT_KEY)
        self.close_label = translate(PROMPT_CLOSE_KEY)

    @property
    def text(self) -> str:
        """The statement shown by the prompt."""
        return self._text

    def set_text(self, value: str) -> None:
        self._text = value

    def set_submit_callback(self, callback: Callable[[], None]) -> None:
        self._submit_callback = callback

    def set_close_callback(self, callback: Callable[[], None]) -> None:
        self._close_callback = callback

    def submit(self) -> None:
        """Press the submit button."""
        if self._submit_callback is None:
            raise RuntimeError("no submit callback is set")
        self._submit_callback()

    def close(self) -> None:
        """Press the close button."""
        if self._close_callback is None:
            raise RuntimeError("no close callback is set")
        self._close_callback()