"""
code_lexer.py — Analizador léxico de fragmentos de código
=========================================================

Recorre el código línea por línea (sólo `\n` separa líneas). En cada
posición se prueba, en orden de prioridad:

1. `//` → comentario hasta el final de la línea
2. `"` … `"` en la misma línea → cadena
3. letra o `_` seguida de letras, dígitos o `_` → palabra
4. secuencia de dígitos → número
5. un símbolo del conjunto fijo → símbolo
6. cualquier otra secuencia sin espacios → lexema erróneo (una cadena sin
   cerrar sigue clasificándose como cadena)

Después cada lexema se clasifica con una cadena de predicados. El
tokenizador nunca lanza excepciones: lo irreconocible se convierte en un
token ERROR.
"""

import string
from typing import Iterator, List, Optional

from ..domain.tokens import CodeToken, CodeTokenKind
from ..infrastructure.grammar_loader import Lexicon, get_lexicon

COMMENT_PREFIX = "//"
QUOTE = '"'

_WORD_START = frozenset(string.ascii_letters + "_")
_WORD_CHARS = _WORD_START | frozenset(string.digits)
_DIGITS = frozenset(string.digits)


def is_identifier(text: str) -> bool:
    return bool(text) and text[0] in _WORD_START and all(c in _WORD_CHARS for c in text)


def is_number(text: str) -> bool:
    return bool(text) and all(c in _DIGITS for c in text)


class CodeLexer:
    """Tokenizador de fragmentos de un lenguaje tipo Java."""

    def __init__(self, lexicon: Optional[Lexicon] = None):
        self.lexicon = lexicon or get_lexicon()

    def scan_line(self, line: str) -> Iterator[str]:
        """Extrae los lexemas de una línea en orden de aparición."""
        i, n = 0, len(line)
        while i < n:
            ch = line[i]
            if ch.isspace():
                i += 1
                continue

            if line.startswith(COMMENT_PREFIX, i):
                yield line[i:].rstrip()
                return

            if ch == QUOTE:
                end = line.find(QUOTE, i + 1)
                if end != -1:
                    yield line[i:end + 1]
                    i = end + 1
                    continue
            elif ch in _WORD_START:
                j = i + 1
                while j < n and line[j] in _WORD_CHARS:
                    j += 1
                yield line[i:j]
                i = j
                continue
            elif ch in _DIGITS:
                j = i + 1
                while j < n and line[j] in _DIGITS:
                    j += 1
                yield line[i:j]
                i = j
                continue
            elif ch in self.lexicon.symbols:
                yield ch
                i += 1
                continue

            # Cadena sin cerrar o carácter desconocido
            j = i + 1
            while j < n and not line[j].isspace():
                j += 1
            yield line[i:j]
            i = j

    def classify(self, text: str) -> CodeTokenKind:
        """Asigna la categoría de un lexema (el primer predicado que se cumple)."""
        if text.startswith(COMMENT_PREFIX):
            return CodeTokenKind.COMMENT
        if text.startswith(QUOTE):
            return CodeTokenKind.STRING
        if text in self.lexicon.keywords:
            return CodeTokenKind.KEYWORD
        if is_number(text):
            return CodeTokenKind.NUMBER
        if is_identifier(text):
            return CodeTokenKind.IDENTIFIER
        if text in self.lexicon.symbols:
            return CodeTokenKind.SYMBOL
        return CodeTokenKind.ERROR

    def tokenize(self, code: str) -> List[CodeToken]:
        """
        Tokeniza un fragmento de código.

        Args:
            code: Fragmento a analizar (puede tener varias líneas)

        Returns:
            Lista de tokens con su número de línea
        """
        tokens: List[CodeToken] = []
        for line_no, line in enumerate(code.split("\n"), start=1):
            for lexeme in self.scan_line(line.rstrip("\r")):
                if not lexeme:
                    continue
                tokens.append(CodeToken(kind=self.classify(lexeme), text=lexeme, line=line_no))
        return tokens
