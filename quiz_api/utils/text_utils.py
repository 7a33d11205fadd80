import re
import string
from urllib.parse import unquote

OPTION_LETTERS = string.ascii_uppercase
MAX_OPTIONS = len(OPTION_LETTERS)


def clean_path_value(raw: str) -> str:
    """
    Décode un segment d'URL (%20 etc.) et retire les espaces autour.
    """
    if not raw:
        return ""
    return unquote(raw).strip()


def exact_ci_pattern(value: str) -> str:
    """
    Regex d'égalité stricte, insensible à la casse côté Mongo ($options "i").
    Les métacaractères sont échappés : "C++" reste littéral.
    """
    return f"^{re.escape(value)}$"


def option_letter(index: int, count: int) -> str:
    """
    Lettre (A, B, C, ...) associée à la position `index` parmi `count` options.
    """
    if count > MAX_OPTIONS:
        raise ValueError(f"Trop d'options ({count}), maximum {MAX_OPTIONS}")
    if index < 0 or index >= count:
        raise ValueError(f"Index d'option hors limites: {index} (options: {count})")
    return OPTION_LETTERS[index]
