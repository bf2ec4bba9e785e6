import re
from typing import List

import jieba

from bm25_search.core.errors import ConfigurationError

LANGUAGES = ("whitespace", "en", "zh")


class Tokenizer:
    def __init__(self, language: str = "whitespace"):
        if language not in LANGUAGES:
            raise ConfigurationError(
                f"unknown tokenizer language {language!r}, expected one of {LANGUAGES}"
            )
        self.language = language

    def tokenize(self, text: str) -> List[str]:
        if not text:
            return []

        text = text.lower()

        if self.language == "en":
            return re.findall(r"[a-z0-9]+", text)
        if self.language == "zh":
            return [w for w in jieba.cut(text) if w.strip()]
        return text.split()
