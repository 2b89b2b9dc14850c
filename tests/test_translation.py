import json

import pytest

from fateseekers.translation import (
    MissingTranslationError,
    TranslationManager,
    parse_message_file,
)

EN = json.dumps(
    {
        "menu.start": "Start",
        "menu.exit": "Exit",
        "greet": "Hello {{.Name}}",
        "settings": {"title": "Settings"},
        "plural": {"description": "count", "other": "Many"},
    }
)
UK = json.dumps({"menu.start": "Почати"}, ensure_ascii=False).encode("utf-8")

TEMPLATES = {"en": EN, "uk": UK}


def test_selected_language():
    assert TranslationManager(TEMPLATES, "uk").get_translation("menu.start") == "Почати"
    assert TranslationManager(TEMPLATES, "en").get_translation("menu.start") == "Start"


def test_falls_back_to_english():
    manager = TranslationManager(TEMPLATES, "uk")
    assert manager.get_translation("menu.exit") == "Exit"


def test_missing_message():
    manager = TranslationManager(TEMPLATES, "uk")
    with pytest.raises(MissingTranslationError):
        manager.get_translation("nowhere")


def test_template_arguments():
    manager = TranslationManager(TEMPLATES, "en")
    assert manager.get_translation("greet", {"Name": "Ann"}) == "Hello Ann"
    assert manager.get_translation("greet") == "Hello <no value>"


def test_unsupported_language():
    with pytest.raises(ValueError):
        TranslationManager(TEMPLATES, "fr")


def test_parse_nested_and_plural():
    messages = parse_message_file(EN)
    assert messages["settings.title"] == "Settings"
    assert messages["plural"] == "Many"
    assert set(messages) == {"menu.start", "menu.exit", "greet", "settings.title", "plural"}


def test_parse_rejects_non_object():
    with pytest.raises(ValueError):
        parse_message_file("[1, 2]")
    with pytest.raises(ValueError):
        parse_message_file('{"bad": 3}')