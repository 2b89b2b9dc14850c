import pytest

from fateseekers.host import validate


@pytest.mark.parametrize(
    "value",
    [
        "localhost:8080",
        "127.0.0.1:8080",
        "example.com:80",
        "game.example.com:9000",
        "localhost:1",
        "10.0.0.1:65535",
    ],
)
def test_valid_hosts(value):
    assert validate(value) is True


@pytest.mark.parametrize(
    "value",
    [
        "",
        "localhost",
        "example.com",
        "localhost:123456",
        "a.b:80",
        "example.com:",
        "http://example.com:80",
        "localhost:8080\n",
        "1.2.3:80",
        "exa mple.com:80",
        "localhost:80a",
    ],
)
def test_invalid_hosts(value):
    assert validate(value) is False


def test_unicode_digits_rejected():
    assert validate("localhost:\u0661\u0662") is False