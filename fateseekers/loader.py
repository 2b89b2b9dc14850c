"""Lazy, cached loading of the game's asset files."""

from __future__ import annotations

import io
import json
import logging
import threading
from pathlib import Path
from typing import Any, Callable, TypeVar, Union

from PIL import Image

from fateseekers.dto import LetterLoaderUnit, parse_letter

# Statics.
BUTTON_IDLE_BUTTON = "ui/button-idle.png"
BUTTON_HOVER_BUTTON = "ui/button-hover.png"
PANEL_IDLE_PANEL = "ui/panel-idle.png"
LIST_DISABLED = "ui/list-disabled.png"
LIST_IDLE = "ui/list-idle.png"
LIST_MASK = "ui/list-mask.png"
LIST_TRACK_DISABLED = "ui/list-track-disabled.png"
LIST_TRACK_IDLE = "ui/list-track-idle.png"
SLIDER_HANDLE_HOVER = "ui/slider-handle-hover.png"
SLIDER_HANDLE_IDLE = "ui/slider-handle-idle.png"
SLIDER_TRACK_IDLE = "ui/slider-track-idle.png"
COMBO_ARRAY_IDLE_BUTTON = "ui/arrow-down-idle.png"
COMBO_IDLE_BUTTON = "ui/combo-button-idle.png"
TEXT_INPUT_IDLE = "ui/text-input-idle.png"

# Shaders.
TOXIC_RAIN_SHADER = "toxic-rain.kage"

# Fonts.
KYIV_REGULAR_FONT = "kyiv-regular.ttf"

# Letters.
LONE_MAN_LETTER = "lone-man.json"

# Templates.
ENGLISH_TEMPLATE = "en/en.json"
UKRAINIAN_TEMPLATE = "uk/uk.json"

# Animations.
SKULL_ANIMATION = "skull/skull.json"
LOGO_ANIMATION = "logo/logo.json"
LOADER_ANIMATION = "loader/loader.json"
BACKGROUND_ANIMATIONS = tuple(
    f"background/{index}/background-{index}.json" for index in range(1, 7)
)
BLINKING_SCREEN_ANIMATIONS = tuple(
    f"blinking-screen/{index}/blinking-screen-{index}.json" for index in range(1, 5)
)

# Sounds.
AMBIENT_MUSIC_SOUND = "music/ambient/ambient.mp3"
ENERGETYK_MUSIC_SOUND = "music/energetyk/energetyk.mp3"
TEST_FX_SOUND = "fx/test/test.ogg"

# Base paths of the asset kinds.
SHADERS_PATH = "dist/shaders"
FONTS_PATH = "dist/fonts"
OBJECTS_PATH = "dist/statics"
LETTERS_PATH = "dist/letters"
TEMPLATES_PATH = "dist/templates"
ANIMATIONS_PATH = "dist/animations"
SOUNDS_PATH = "dist/sounds"

_READING_FILE = "err happened during file read operation"
_LOADING_SHADER = "err happened during shader loading operation"
_LOADING_FONT = "err happened during font loading operation"
_LOADING_STATIC = "err happened during image loading operation"
_LOADING_ANIMATION = "err happened during animation loading operation"

_FONT_SIGNATURES = (b"\x00\x01\x00\x00", b"OTTO", b"true", b"ttcf")

_logger = logging.getLogger(__name__)

T = TypeVar("T")

Frame = tuple[Image.Image, int]


class AssetError(Exception):
    """Raised when an asset cannot be read or decoded."""


def _decode_image(data: bytes) -> Image.Image:
    image = Image.open(io.BytesIO(data))
    image.load()
    return image


class Loader:
    """Loads assets below a root directory on first use and caches them."""

    def __init__(self, root: Union[str, Path]) -> None:
        self._root = Path(root)
        self._lock = threading.Lock()
        self._statics: dict[str, Image.Image] = {}
        self._shaders: dict[str, str] = {}
        self._fonts: dict[str, bytes] = {}
        self._letters: dict[str, LetterLoaderUnit] = {}
        self._templates: dict[str, bytes] = {}
        self._animations: dict[str, tuple[Frame, ...]] = {}
        self._sounds: dict[str, bytes] = {}

    def _read(self, base: str, name: str) -> bytes:
        try:
            return (self._root / base / name).read_bytes()
        except OSError as exc:
            raise AssetError(f"{_READING_FILE}: {exc}") from exc

    def _cached(
        self, cache: dict[str, T], name: str, load: Callable[[str], T], kind: str
    ) -> T:
        with self._lock:
            if name in cache:
                return cache[name]
        value = load(name)
        with self._lock:
            value = cache.setdefault(name, value)
        _logger.debug("%s has been loaded", kind, extra={"asset": name})
        return value

    def _load_static(self, name: str) -> Image.Image:
        data = self._read(OBJECTS_PATH, name)
        try:
            return _decode_image(data)
        except OSError as exc:
            raise AssetError(f"{_LOADING_STATIC}: {exc}") from exc

    def _load_shader(self, name: str) -> str:
        data = self._read(SHADERS_PATH, name)
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise AssetError(f"{_LOADING_SHADER}: {exc}") from exc

    def _load_font(self, name: str) -> bytes:
        data = self._read(FONTS_PATH, name)
        if not data.startswith(_FONT_SIGNATURES):
            raise AssetError(f"{_LOADING_FONT}: unsupported font format in {name!r}")
        return data

    def _load_letter(self, name: str) -> LetterLoaderUnit:
        data = self._read(LETTERS_PATH, name)
        try:
            return parse_letter(data)
        except ValueError as exc:
            raise AssetError(f"{_READING_FILE}: {exc}") from exc

    def _load_animation(self, name: str) -> tuple[Frame, ...]:
        path = self._root / ANIMATIONS_PATH / name
        data = self._read(ANIMATIONS_PATH, name)
        try:
            document: Any = json.loads(data)
            entries = document["frames"]
            if isinstance(entries, dict):
                entries = list(entries.values())
            sheet = _decode_image((path.parent / document["meta"]["image"]).read_bytes())
            frames = []
            for entry in entries:
                box = entry["frame"]
                x, y, w, h = (int(box[key]) for key in ("x", "y", "w", "h"))
                frames.append((sheet.crop((x, y, x + w, y + h)), int(entry.get("duration", 100))))
        except (ValueError, KeyError, TypeError, OSError) as exc:
            raise AssetError(f"{_LOADING_ANIMATION}: {exc}") from exc
        if not frames:
            raise AssetError(f"{_LOADING_ANIMATION}: {name!r} has no frames")
        return tuple(frames)

    def get_static(self, name: str) -> Image.Image:
        """Return the decoded image with the given name."""
        return self._cached(self._statics, name, self._load_static, "Static")

    def get_shader(self, name: str) -> str:
        """Return the shader source with the given name."""
        return self._cached(self._shaders, name, self._load_shader, "Shader")

    def get_font(self, name: str) -> bytes:
        """Return the font file contents with the given name."""
        return self._cached(self._fonts, name, self._load_font, "Font")

    def get_letter(self, name: str) -> LetterLoaderUnit:
        """Return the parsed letter with the given name."""
        return self._cached(self._letters, name, self._load_letter, "Letter")

    def get_template(self, name: str) -> bytes:
        """Return the raw translation template with the given name."""
        return self._cached(
            self._templates, name, lambda n: self._read(TEMPLATES_PATH, n), "Template"
        )

    def get_sound(self, name: str) -> io.BytesIO:
        """Return a fresh stream over the sound file with the given name."""
        data = self._cached(
            self._sounds, name, lambda n: self._read(SOUNDS_PATH, n), "Sound"
        )
        return io.BytesIO(data)

    def get_animation(self, name: str, shared: bool = False) -> tuple[Frame, ...]:
        """Return animation frames as (image, duration in ms) pairs.

        A shared animation is cached and the same object is returned each
        time; otherwise a new one is loaded on every call.
        """
        if shared:
            return self._cached(self._animations, name, self._load_animation, "Animation")
        return self._load_animation(name)