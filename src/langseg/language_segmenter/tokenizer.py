"""Whitespace-preserving word/punctuation tokenizer."""

from dataclasses import dataclass

import regex


@dataclass(frozen=True)
class Token:
    """A word or punctuation run plus the whitespace that follows it."""

    text: str
    trailing_space: str = ""


# Words: letters, digits, underscore, apostrophe, hyphen.
# Punctuation runs: anything that is neither a word character nor whitespace.
TOKEN_PATTERN = regex.compile(r"[\w'-]+|[^\w\s'-]+")


def tokenize(text: str) -> list[Token]:
    """
    Split text into tokens, attaching inter-token whitespace to the left token.

    Joining ``token.text + token.trailing_space`` for every token reproduces
    the input starting at the first token. Whitespace before the first token
    is dropped.

    Args:
        text: Text to tokenize.

    Returns:
        List of Token, empty for empty or whitespace-only text.
    """
    matches = list(TOKEN_PATTERN.finditer(text))
    tokens: list[Token] = []

    for i, match in enumerate(matches):
        end = matches[i + 1].start() if i + 1 < len(matches) else len(text)
        tokens.append(Token(text=match.group(), trailing_space=text[match.end():end]))

    return tokens


def detokenize(tokens: list[Token]) -> str:
    """Inverse of tokenize (minus any dropped leading whitespace)."""
    return "".join(token.text + token.trailing_space for token in tokens)
