from fateseekers.components import NotificationComponent, SubtitlesComponent, TextLine
from fateseekers.queues import NotificationManager, SubtitlesManager
from fateseekers.widgets import NOTIFICATION_ERROR_TEXT_COLOR, NOTIFICATION_INFO_TEXT_COLOR


def test_notification_starts_empty():
    assert NotificationComponent().lines == ()


def test_notification_set_and_clean():
    component = NotificationComponent()
    component.set_text("first", NOTIFICATION_ERROR_TEXT_COLOR)
    component.set_text("second", NOTIFICATION_INFO_TEXT_COLOR)
    assert component.lines == (
        TextLine("first", NOTIFICATION_ERROR_TEXT_COLOR),
        TextLine("second", NOTIFICATION_INFO_TEXT_COLOR),
    )
    component.clean_text()
    assert component.lines == ()


def test_subtitles_are_white():
    component = SubtitlesComponent()
    component.set_text("hello")
    assert component.lines == (TextLine("hello", NOTIFICATION_INFO_TEXT_COLOR),)
    component.clean_text()
    assert component.lines == ()


def test_subtitles_component_driven_by_manager():
    now = [0.0]
    component = SubtitlesComponent()
    manager = SubtitlesManager(component, clock=lambda: now[0])
    manager.push("line", 2.0)
    manager.update()
    assert [line.text for line in component.lines] == ["line"]
    now[0] = 2.0
    manager.update()
    assert component.lines == ()
    assert manager.is_empty() is True


def test_notification_component_driven_by_manager():
    component = NotificationComponent()
    manager = NotificationManager(component, clock=lambda: 0.0)
    manager.push("warn", 1.0, NOTIFICATION_ERROR_TEXT_COLOR)
    manager.update()
    assert component.lines == (TextLine("warn", NOTIFICATION_ERROR_TEXT_COLOR),)
    assert manager.is_empty() is False