"""Languages used by AniList for staff and voice actors."""

from typing import Dict

from .enums import AniListEnum


class Language(AniListEnum):
    """Language of a person, as reported by ``languageV2``.

    Values are the spellings AniList sends. Two letter ISO codes and a few
    alternative spellings are accepted on input, so ``Language("en")``,
    ``Language("UK")`` and ``Language("English")`` are the same member.
    Anything unrecognised is Japanese.
    """

    JAPANESE = "Japanese"
    ENGLISH = "English"
    KOREAN = "Korean"
    ITALIAN = "Italian"
    SPANISH = "Spanish"
    PORTUGUESE = "Portuguese"
    FRENCH = "French"
    GERMAN = "German"
    HEBREW = "Hebrew"
    HUNGARIAN = "Hungarian"
    CHINESE = "Chinese"
    ARABIC = "Arabic"
    FILIPINO = "Filipino"
    CATALAN = "Catalan"
    FINNISH = "Finnish"
    TURKISH = "Turkish"
    DUTCH = "Dutch"
    SWEDISH = "Swedish"
    THAI = "Thai"
    TAGALOG = "Tagalog"
    MALAYSIAN = "Malaysian"
    INDONESIAN = "Indonesian"
    VIETNAMESE = "Vietnamese"
    NEPALI = "Nepali"
    HINDI = "Hindi"
    URDU = "Urdu"
    POLISH = "Polish"

    @classmethod
    def _aliases(cls) -> Dict[str, AniListEnum]:
        aliases: Dict[str, AniListEnum] = {
            code.upper(): member for member, code in _CODES.items()
        }
        aliases.update({"JP": cls.JAPANESE, "UK": cls.ENGLISH, "PHILIPPINE": cls.FILIPINO})
        return aliases

    @classmethod
    def _labels(cls) -> Dict[AniListEnum, str]:
        return {member: member.value for member in cls}

    @property
    def code(self) -> str:
        """ISO 639 code (two letters, ``fil`` for Filipino)."""
        return _CODES[self]

    @property
    def iso(self) -> str:
        return self.code

    @property
    def native(self) -> str:
        """Name of the language written in that language."""
        return _NATIVE_NAMES[self]


_CODES: Dict[Language, str] = {
    Language.JAPANESE: "ja",
    Language.ENGLISH: "en",
    Language.KOREAN: "ko",
    Language.ITALIAN: "it",
    Language.SPANISH: "es",
    Language.PORTUGUESE: "pt",
    Language.FRENCH: "fr",
    Language.GERMAN: "de",
    Language.HEBREW: "he",
    Language.HUNGARIAN: "hu",
    Language.CHINESE: "zh",
    Language.ARABIC: "ar",
    Language.FILIPINO: "fil",
    Language.CATALAN: "ca",
    Language.FINNISH: "fi",
    Language.TURKISH: "tr",
    Language.DUTCH: "nl",
    Language.SWEDISH: "sv",
    Language.THAI: "th",
    Language.TAGALOG: "tl",
    Language.MALAYSIAN: "ms",
    Language.INDONESIAN: "id",
    Language.VIETNAMESE: "vi",
    Language.NEPALI: "ne",
    Language.HINDI: "hi",
    Language.URDU: "ur",
    Language.POLISH: "pl",
}

_NATIVE_NAMES: Dict[Language, str] = {
    Language.JAPANESE: "日本語",
    Language.ENGLISH: "English",
    Language.KOREAN: "한국어",
    Language.ITALIAN: "Italiano",
    Language.SPANISH: "Español",
    Language.PORTUGUESE: "Português",
    Language.FRENCH: "Français",
    Language.GERMAN: "Deutsch",
    Language.HEBREW: "עברית",
    Language.HUNGARIAN: "Magyar",
    Language.CHINESE: "中文",
    Language.ARABIC: "العربية",
    Language.FILIPINO: "Filipino",
    Language.CATALAN: "Català",
    Language.FINNISH: "Suomi",
    Language.TURKISH: "Türkçe",
    Language.DUTCH: "Nederlands",
    Language.SWEDISH: "Svenska",
    Language.THAI: "ไทย",
    Language.TAGALOG: "Tagalog",
    Language.MALAYSIAN: "Bahasa Melayu",
    Language.INDONESIAN: "Bahasa Indonesia",
    Language.VIETNAMESE: "Tiếng Việt",
    Language.NEPALI: "नेपाली",
    Language.HINDI: "हिंदी",
    Language.URDU: "اردو",
    Language.POLISH: "Polski",
}
