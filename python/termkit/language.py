"""Two-letter language code catalog.

Codes follow the classic ISO 639-1 list, including the legacy codes
``iw`` (Hebrew), ``in`` (Indonesian) and ``ji`` (Yiddish).
"""

from enum import Enum
from typing import Optional


class Language(Enum):
    """Language identified by its two-letter code."""

    ABKHAZIAN = "ab"
    AFAR = "aa"
    AFRIKAANS = "af"
    ALBANIAN = "sq"
    AMHARIC = "am"
    ARABIC = "ar"
    ARMENIAN = "hy"
    ASSAMESE = "as"
    AYMARA = "ay"
    AZERBAIJANI = "az"
    BASHKIR = "ba"
    BASQUE = "eu"
    BENGALI = "bn"
    BHUTANI = "dz"
    BIHARI = "bh"
    BISLAMA = "bi"
    BRETON = "br"
    BULGARIAN = "bg"
    BURMESE = "my"
    BYELORUSSIAN = "be"
    CAMBODIAN = "km"
    CATALAN = "ca"
    CHINESE = "zh"
    CORSICAN = "co"
    CROATIAN = "hr"
    CZECH = "cs"
    DANISH = "da"
    DUTCH = "nl"
    ENGLISH = "en"
    ESPERANTO = "eo"
    ESTONIAN = "et"
    FAEROESE = "fo"
    FIJI = "fj"
    FINNISH = "fi"
    FRENCH = "fr"
    FRISIAN = "fy"
    GAELIC = "gd"
    GALICIAN = "gl"
    GEORGIAN = "ka"
    GERMAN = "de"
    GREEK = "el"
    GREENLANDIC = "kl"
    GUARANI = "gn"
    GUJARATI = "gu"
    HAUSA = "ha"
    HEBREW = "iw"
    HINDI = "hi"
    HUNGARIAN = "hu"
    ICELANDIC = "is"
    INDONESIAN = "in"
    INTERLINGUA = "ia"
    INTERLINGUE = "ie"
    INUPIAK = "ik"
    IRISH = "ga"
    ITALIAN = "it"
    JAPANESE = "ja"
    JAVANESE = "jw"
    KANNADA = "kn"
    KASHMIRI = "ks"
    KAZAKH = "kk"
    KINYARWANDA = "rw"
    KIRGHIZ = "ky"
    KIRUNDI = "rn"
    KOREAN = "ko"
    KURDISH = "ku"
    LAOTHIAN = "lo"
    LATIN = "la"
    LATVIAN = "lv"
    LINGALA = "ln"
    LITHUANIAN = "lt"
    MACEDONIAN = "mk"
    MALAGASY = "mg"
    MALAY = "ms"
    MALAYALAM = "ml"
    MALTESE = "mt"
    MAORI = "mi"
    MARATHI = "mr"
    MOLDAVIAN = "mo"
    MONGOLIAN = "mn"
    NAURU = "na"
    NEPALI = "ne"
    NORWEGIAN = "no"
    OCCITAN = "oc"
    ORIYA = "or"
    OROMO = "om"
    PASHTO = "ps"
    PERSIAN = "fa"
    POLISH = "pl"
    PORTUGUESE = "pt"
    PUNJABI = "pa"
    QUECHUA = "qu"
    RHAETO_ROMANCE = "rm"
    ROMANIAN = "ro"
    RUSSIAN = "ru"
    SAMOAN = "sm"
    SANGRO = "sg"
    SANSKRIT = "sa"
    SERBIAN = "sr"
    SERBO_CROATIAN = "sh"
    SESOTHO = "st"
    SETSWANA = "tn"
    SHONA = "sn"
    SINDHI = "sd"
    SINGHALESE = "si"
    SISWATI = "ss"
    SLOVAK = "sk"
    SLOVENIAN = "sl"
    SOMALI = "so"
    SPANISH = "es"
    SUDANESE = "su"
    SWAHILI = "sw"
    SWEDISH = "sv"
    TAGALOG = "tl"
    TAJIK = "tg"
    TAMIL = "ta"
    TATAR = "tt"
    TEGULU = "te"
    THAI = "th"
    TIBETAN = "bo"
    TIGRINYA = "ti"
    TONGA = "to"
    TSONGA = "ts"
    TURKISH = "tr"
    TURKMEN = "tk"
    TWI = "tw"
    UKRAINIAN = "uk"
    URDU = "ur"
    UZBEK = "uz"
    VIETNAMESE = "vi"
    VOLAPUK = "vo"
    WELSH = "cy"
    WOLOF = "wo"
    XHOSA = "xh"
    YIDDISH = "ji"
    YORUBA = "yo"
    ZULU = "zu"

    @property
    def code(self) -> str:
        """Two-letter code, e.g. "en"."""
        return self.value

    @property
    def display_name(self) -> str:
        """English name, e.g. "Rhaeto Romance" for RHAETO_ROMANCE."""
        return " ".join(token.capitalize() for token in self.name.split("_"))

    @classmethod
    def from_code(cls, code: Optional[str]) -> Optional["Language"]:
        """Get Language from a two-letter code.

        Returns:
            Matching Language, or None if code is None or unknown.
        """
        if code is None:
            return None
        try:
            return cls(code)
        except ValueError:
            return None

    @classmethod
    def codes(cls) -> list[str]:
        """Get all two-letter codes in catalog order."""
        return [language.code for language in cls]

    def __str__(self) -> str:
        return self.display_name
