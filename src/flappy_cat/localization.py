"""
localization.py: Player-facing text and the title-by-score ladder.
"""

from dataclasses import dataclass
from typing import Dict, Tuple

from .constants import DEFAULT_LOCALE


@dataclass(frozen=True)
class Title:
    score: int
    title: str


# Sorted by ascending score threshold
TITLES: Dict[str, Tuple[Title, ...]] = {
    "tr": (
        Title(0, "Yavru Kedi"),
        Title(10, "Ev Kedisi"),
        Title(20, "Sokak Kedisi"),
        Title(30, "Mahalle Şampiyonu"),
        Title(40, "Şehir Kaşifi"),
        Title(50, "Bölge Kahramanı"),
        Title(60, "Ulusal Yıldız"),
        Title(70, "Dünya Yıldızı"),
        Title(80, "Efsanevi Kedi"),
        Title(90, "Uzay Kedisi"),
        Title(100, "Galaksinin Koruyucusu"),
    ),
    "en": (
        Title(0, "Kitten"),
        Title(10, "House Cat"),
        Title(20, "Street Cat"),
        Title(30, "Neighborhood Champion"),
        Title(40, "City Explorer"),
        Title(50, "Regional Hero"),
        Title(60, "National Star"),
        Title(70, "World Star"),
        Title(80, "Legendary Cat"),
        Title(90, "Space Cat"),
        Title(100, "Guardian of the Galaxy"),
    ),
}

MESSAGES: Dict[str, Dict[str, str]] = {
    "tr": {
        "game_name": "Uçan Kedi",
        "start_prompt": "Başlamak için tıkla veya boşluk tuşuna bas",
        "game_over": "OYUN BİTTİ",
        "score": "Puan: {score}",
        "title": "Unvan: {title}",
        "restart": "Yeniden Başla",
    },
    "en": {
        "game_name": "Flappy Cat",
        "start_prompt": "Click or press space to start",
        "game_over": "GAME OVER",
        "score": "Score: {score}",
        "title": "Title: {title}",
        "restart": "Restart",
    },
}


def supported_locales() -> Tuple[str, ...]:
    return tuple(sorted(MESSAGES))


def _resolve(locale: str) -> str:
    if locale in MESSAGES:
        return locale
    # "en_US" -> "en"
    base = locale.replace("-", "_").split("_")[0].lower()
    return base if base in MESSAGES else DEFAULT_LOCALE


def get_title(score: int, locale: str = DEFAULT_LOCALE) -> str:
    """The highest title whose threshold is <= score; the first one otherwise."""
    titles = TITLES[_resolve(locale)]
    for entry in reversed(titles):
        if score >= entry.score:
            return entry.title
    return titles[0].title


def get_text(key: str, locale: str = DEFAULT_LOCALE, **kwargs) -> str:
    """Looks up a message and fills its placeholders. Unknown keys raise KeyError."""
    return MESSAGES[_resolve(locale)][key].format(**kwargs)
