#!/usr/bin/env python3
"""
Tokenizer for translation definitions

Splits a definition into whitespace separated words, with each configured
special character emitted as a token of its own. Double quoted text is read
as a single token without the quotes.
"""

from typing import Optional

from .constants import TRANSLATION_DELIMITERS


class Tokenizer:
    """Cursor over the tokens of a definition string"""

    def __init__(self, text: str = "", special_characters: str = TRANSLATION_DELIMITERS):
        self.special_characters = special_characters
        self.tokens: list[str] = []
        self.position = 0
        self.open_string(text)

    def open_string(self, text: str):
        """Tokenize a new string and rewind to its start"""
        self.tokens = self._split(text)
        self.position = 0

    def _split(self, text: str) -> list[str]:
        tokens = []
        current = []
        i = 0
        while i < len(text):
            char = text[i]
            if char == '"':
                if current:
                    tokens.append("".join(current))
                    current = []
                end = text.find('"', i + 1)
                if end < 0:
                    end = len(text)
                tokens.append(text[i + 1:end])
                i = end + 1
                continue
            if char.isspace() or char in self.special_characters:
                if current:
                    tokens.append("".join(current))
                    current = []
                if char in self.special_characters:
                    tokens.append(char)
            else:
                current.append(char)
            i += 1
        if current:
            tokens.append("".join(current))
        return tokens

    def at_end(self) -> bool:
        return self.position >= len(self.tokens)

    def peek_token(self) -> str:
        """Get the next token without consuming it ('' at the end)"""
        if self.at_end():
            return ""
        return self.tokens[self.position]

    def get_token(self) -> str:
        """Consume and return the next token ('' at the end)"""
        token = self.peek_token()
        if not self.at_end():
            self.position += 1
        return token

    def skip_token(self):
        self.get_token()

    def check_token(self, literal: str) -> bool:
        """Consume the next token if it equals the literal"""
        if self.peek_token() == literal:
            self.position += 1
            return True
        return False

    def get_integer(self) -> Optional[int]:
        """Consume the next token as an integer, None if it isn't one"""
        token = self.get_token()
        try:
            return int(token)
        except ValueError:
            return None

    def get_float(self) -> Optional[float]:
        """Consume the next token as a float, None if it isn't one"""
        token = self.get_token()
        try:
            return float(token)
        except ValueError:
            return None
