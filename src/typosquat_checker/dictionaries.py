"""
Mutation dictionaries: misspellings, homophones and affix word lists.

The built-in tables map a correctly spelled word to the way it is commonly
misspelt, and a word to the words that sound like it. Prefix and suffix
word lists are plain text resources, one word per line, loaded once at
startup. A missing word list yields no words rather than an error.
"""

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional

from .exceptions import ResourceMissingError


DATA_DIRECTORY = Path(__file__).resolve().parent / "data"
PREFIX_FILENAME = "prefix-dictionary.txt"
SUFFIX_FILENAME = "suffix-dictionary.txt"


# Correct spelling -> common misspelling
COMMON_MISSPELLINGS: dict[str, str] = {
    "absence": "absense",
    "accommodate": "accomodate",
    "achieve": "acheive",
    "across": "accross",
    "address": "adress",
    "advertise": "advertize",
    "apparent": "apparant",
    "argument": "arguement",
    "believe": "beleive",
    "business": "buisness",
    "calendar": "calender",
    "category": "catagory",
    "cemetery": "cemetary",
    "colleague": "collegue",
    "coming": "comming",
    "commitment": "committment",
    "committee": "commitee",
    "definitely": "definately",
    "dilemma": "dilema",
    "embarrass": "embarass",
    "environment": "enviroment",
    "existence": "existance",
    "familiar": "familar",
    "finally": "finaly",
    "foreign": "foriegn",
    "friend": "freind",
    "government": "goverment",
    "guarantee": "garantee",
    "happened": "happend",
    "harass": "harrass",
    "immediately": "immediatly",
    "independent": "independant",
    "knowledge": "knowlege",
    "library": "libary",
    "license": "lisence",
    "maintenance": "maintainance",
    "management": "managment",
    "millennium": "millenium",
    "necessary": "neccessary",
    "noticeable": "noticable",
    "occasion": "ocassion",
    "occurred": "occured",
    "occurrence": "occurence",
    "payment": "paymant",
    "piece": "peice",
    "possession": "posession",
    "privilege": "priviledge",
    "professor": "proffesor",
    "publicly": "publically",
    "really": "realy",
    "receipt": "reciept",
    "receive": "recieve",
    "recommend": "reccomend",
    "referred": "refered",
    "relevant": "relevent",
    "restaurant": "restaraunt",
    "schedule": "schedual",
    "secretary": "secratary",
    "security": "securty",
    "separate": "seperate",
    "service": "servise",
    "successful": "succesful",
    "support": "suport",
    "surprise": "suprise",
    "tomorrow": "tommorow",
    "truly": "truely",
    "until": "untill",
    "weird": "wierd",
    "which": "wich",
}

# Word -> words that sound the same
HOMOPHONES: dict[str, tuple[str, ...]] = {
    "ate": ("eight",),
    "bare": ("bear",),
    "be": ("bee",),
    "blue": ("blew",),
    "buy": ("by", "bye"),
    "cell": ("sell",),
    "cent": ("scent", "sent"),
    "dear": ("deer",),
    "die": ("dye",),
    "eight": ("ate",),
    "fair": ("fare",),
    "flower": ("flour",),
    "for": ("four", "fore"),
    "four": ("for", "fore"),
    "hear": ("here",),
    "here": ("hear",),
    "hole": ("whole",),
    "hour": ("our",),
    "knight": ("night",),
    "know": ("no",),
    "mail": ("male",),
    "meat": ("meet",),
    "new": ("knew", "gnu"),
    "night": ("knight",),
    "one": ("won",),
    "pair": ("pear", "pare"),
    "peace": ("piece",),
    "plain": ("plane",),
    "right": ("write", "rite"),
    "road": ("rode",),
    "sale": ("sail",),
    "sea": ("see",),
    "see": ("sea",),
    "son": ("sun",),
    "sun": ("son",),
    "tail": ("tale",),
    "to": ("two", "too"),
    "two": ("to", "too"),
    "way": ("weigh",),
    "weather": ("whether",),
    "week": ("weak",),
    "wood": ("would",),
    "write": ("right", "rite"),
}


def load_word_list(path: Path, strict: bool = False) -> list[str]:
    """
    Load a line-delimited word list, skipping blank lines and '#' comments.

    Args:
        path: File to read
        strict: Raise instead of returning an empty list when the file is missing

    Raises:
        ResourceMissingError: If strict and the file does not exist
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        if strict:
            raise ResourceMissingError(
                code="resource_missing",
                message=f"Word list not found: {path}",
                details={"path": str(path)},
            )
        return []

    words = []
    for line in text.splitlines():
        word = line.strip().lower()
        if not word or word.startswith("#"):
            continue
        if word not in words:
            words.append(word)
    return words


@dataclass(frozen=True)
class MutationDictionaries:
    """Read-only word data consumed by the typo generator."""

    misspellings: Mapping[str, str] = field(default_factory=dict)
    homophones: Mapping[str, tuple[str, ...]] = field(default_factory=dict)
    prefixes: tuple[str, ...] = ()
    suffixes: tuple[str, ...] = ()

    @classmethod
    def default(cls, affix_directory: Optional[Path] = None) -> "MutationDictionaries":
        """
        Build the bundled dictionaries.

        Args:
            affix_directory: Directory holding prefix-dictionary.txt and
                             suffix-dictionary.txt; defaults to the package data
        """
        directory = affix_directory or DATA_DIRECTORY
        return cls(
            misspellings=MappingProxyType(dict(COMMON_MISSPELLINGS)),
            homophones=MappingProxyType(dict(HOMOPHONES)),
            prefixes=tuple(load_word_list(directory / PREFIX_FILENAME)),
            suffixes=tuple(load_word_list(directory / SUFFIX_FILENAME)),
        )

    def misspellings_containing(self, text: str) -> dict[str, str]:
        """Misspelling entries whose key occurs as a substring of text."""
        return {
            word: misspelling
            for word, misspelling in self.misspellings.items()
            if word in text
        }

    def homophones_containing(self, text: str) -> dict[str, tuple[str, ...]]:
        """Homophone entries whose key occurs as a substring of text."""
        return {
            word: tuple(replacements)
            for word, replacements in self.homophones.items()
            if word in text
        }
