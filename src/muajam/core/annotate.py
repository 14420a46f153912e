"""
Annotation: classify every word token against the lexicon.

Delimiters pass through as always-matched tokens. Words are handed to
the lexicon's match() one at a time, no caching.
"""

from typing import Protocol

from muajam.core.models import AnnotatedDocument, AnnotatedToken
from muajam.core.normalize import normalize_for_display
from muajam.core.tokenize import Token, tokenize


class Matcher(Protocol):
    def match(self, token: str) -> AnnotatedToken: ...


class Annotator:
    def __init__(self, lexicon: Matcher):
        self.lexicon = lexicon

    def annotate_token(self, token: Token) -> AnnotatedToken:
        if token.is_delimiter:
            return AnnotatedToken.delimiter(token.text)
        result = self.lexicon.match(token.text)
        # surface text comes from the token, flags from the store
        return AnnotatedToken(
            text=token.text,
            matched=result.matched,
            exact_match=result.exact_match,
            definition=result.definition,
        )

    def annotate(self, tokens: list[Token]) -> list[AnnotatedToken]:
        return [self.annotate_token(t) for t in tokens]

    def annotate_text(self, text: str) -> AnnotatedDocument:
        content = normalize_for_display(text)
        return AnnotatedDocument(content=content, tokens=self.annotate(tokenize(content)))
