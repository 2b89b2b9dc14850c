# fateseekers

Client-side helpers for the Fate Seekers game, usable from plain Python code:

- `fateseekers.dto`: data units such as `LetterLoaderUnit`, `SubtitlesUnit`,
  `NotificationUnit` and `GeneratedQuestionUnit`; `parse_letter()` reads a
  JSON letter document and `compose_reducer_result()` builds a key/value
  mapping from `ReducerResultUnit` items.
- `fateseekers.host`: `validate()` checks a networking host of the form
  `host:port`, where the host is a domain name, `localhost` or an IPv4 address.
- `fateseekers.widgets`: the `Color` type and the shared text colours,
  `nine_slice()` geometry for stretchable images, and `limit_input()`, which
  takes at most one new character per change and refuses text that reaches
  the length limit.
- `fateseekers.queues`: `SubtitlesManager` and `NotificationManager` show
  queued lines one at a time, each for its duration in seconds. A
  notification's time runs only while it is visible (`toggle_visible()`).
- `fateseekers.components`: `SubtitlesComponent` and `NotificationComponent`
  hold the lines currently on screen and can serve as displays for the queues.
- `fateseekers.dialogs`: `AnswerInputComponent` and `PromptComponent` keep a
  dialog's text, typed input and submit/close callbacks.
- `fateseekers.loader`: `Loader` reads assets under a root directory
  (`dist/statics`, `dist/fonts`, `dist/letters`, ...) on first use and caches
  them; images are decoded with Pillow, and animations are read from a JSON
  sprite sheet into `(image, duration in ms)` frames. Failures raise
  `AssetError`.
- `fateseekers.translation`: `parse_message_file()` and
  `TranslationManager`, which looks up messages in the selected language,
  falls back to English and fills `{{.Name}}` fields. Unknown messages raise
  `MissingTranslationError`.
- `fateseekers.logs`: `configure()` sets up the `fateseekers` logger to write
  JSON lines (`JsonFormatter`) to a size-rotated file, rotated again at
  start-up, and optionally to standard error in debug mode.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from fateseekers.host import validate

validate("localhost:8080")   # True
validate("example")          # False
```

```python
from fateseekers.components import SubtitlesComponent
from fateseekers.queues import SubtitlesManager

display = SubtitlesComponent()
manager = SubtitlesManager(display)
manager.push("Hello", 3.0)
manager.update()
print(display.lines[0].text)  # "Hello"
```

```python
from fateseekers.dialogs import PromptComponent

prompt = PromptComponent(lambda key: key)
prompt.set_text("Leave the session?")
prompt.set_submit_callback(lambda: print("submitted"))
prompt.submit()
```

## What this package does not do

It has no command and draws no screens: the components and dialogs only hold
text, input and callbacks for a front end to render. It keeps no application
state store, does not generate arithmetic questions, stores nothing in a
database and does not apply or save user settings; callers supply those parts
themselves.