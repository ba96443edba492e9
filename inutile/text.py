"""String helpers."""

from typing import Optional

_AFFIRMATIVES = {"sim": True, "nao": False}


def _require_str(text: object) -> None:
    if not isinstance(text, str):
        raise TypeError(f"Expected str, got {type(text).__name__}")


def affirmative_to_boolean(text: str) -> Optional[bool]:
    """
    Convert the answers "Sim" and "Não" to True and False.

    Anything else gives None.
    """
    _require_str(text)
    answer = text.lower().replace("ã", "a", 1)
    return _AFFIRMATIVES.get(answer)


def capitalize(text: str) -> str:
    """
    Capitalize every word longer than one character.

    >>> capitalize("eu sou uma FRASE rs")
    'Eu Sou Uma Frase Rs'
    >>> capitalize("casa E jardim")
    'Casa e Jardim'
    """
    _require_str(text)
    words = text.lower().split(" ")
    return " ".join(
        word if len(word) == 1 else word[:1].upper() + word[1:] for word in words
    )
