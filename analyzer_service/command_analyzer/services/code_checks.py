"""Pasadas de verificación del analizador de fragmentos.

Responsabilidad: recorrer la secuencia de tokens y acumular hallazgos.

- Balance de delimitadores: `()` y `{}` deben cerrar en cero.
- Declaraciones y usos: disciplina declarar-antes-de-usar sobre una
  `SymbolTable` nueva por análisis.
- Terminador de sentencia: regla opcional (desactivada por defecto).
"""

from collections import defaultdict
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel

from ..domain.results import ErrorCategory
from ..domain.tokens import CodeToken, CodeTokenKind
from ..infrastructure.grammar_loader import Lexicon
from .symbol_table import SymbolTable


class Finding(BaseModel):
    """Hallazgo sintáctico o semántico.

    Attributes:
        category: Categoría del hallazgo
        msg: Mensaje descriptivo
        line: Línea del token que lo originó
    """
    category: ErrorCategory
    msg: str
    line: Optional[int] = None


DELIMITER_PAIRS: Dict[str, Tuple[str, str]] = {
    "paréntesis": ("(", ")"),
    "llaves": ("{", "}"),
}

MEMBER_ACCESS = "."
STATEMENT_TERMINATORS = frozenset({";", "{", "}"})


def check_balance(tokens: List[CodeToken]) -> List[Finding]:
    """Contadores de balance para cada par de delimitadores."""
    balance = {name: 0 for name in DELIMITER_PAIRS}
    for tok in tokens:
        if tok.kind != CodeTokenKind.SYMBOL:
            continue
        for name, (opening, closing) in DELIMITER_PAIRS.items():
            if tok.text == opening:
                balance[name] += 1
            elif tok.text == closing:
                balance[name] -= 1

    findings = []
    for name, (opening, closing) in DELIMITER_PAIRS.items():
        count = balance[name]
        if count == 0:
            continue
        unmatched = opening if count > 0 else closing
        findings.append(Finding(
            category=ErrorCategory.SYNTACTIC,
            msg=f"Error Sintáctico: {name} desbalanceados ({abs(count)} '{unmatched}' sin pareja).",
        ))
    return findings


class DeclarationChecker:
    """Registra declaraciones y verifica usos en orden de aparición.

    Un sitio de declaración es un identificador precedido por:
    - una palabra de tipo (`int x`) o `class` (`class Foo`)
    - una palabra de tipo y `[ ]` (`int[] xs`)
    - un identificador ya declarado como clase (`Foo f`, `Foo[] fs`)

    Cualquier otro identificador que no siga a `.` es un uso.
    """

    def __init__(self, lexicon: Lexicon):
        self.lexicon = lexicon

    def _type_name(self, tok: CodeToken, table: SymbolTable) -> Optional[str]:
        if tok.kind == CodeTokenKind.KEYWORD and tok.text in self.lexicon.type_keywords:
            return tok.text
        if tok.kind == CodeTokenKind.IDENTIFIER and table.type_of(tok.text) == self.lexicon.class_keyword:
            return tok.text
        return None

    def declared_type(self, tokens: List[CodeToken], i: int, table: SymbolTable) -> Optional[str]:
        """Tipo que declara el identificador en la posición `i`, o None si es un uso."""
        if i < 1:
            return None
        prev = tokens[i - 1]
        if prev.kind == CodeTokenKind.KEYWORD and prev.text == self.lexicon.class_keyword:
            return self.lexicon.class_keyword

        type_name = self._type_name(prev, table)
        if type_name is not None:
            return type_name

        if i >= 3 and prev.text == "]" and tokens[i - 2].text == "[":
            element = self._type_name(tokens[i - 3], table)
            if element is not None:
                return f"{element}[]"
        return None

    def run(self, tokens: List[CodeToken]) -> Tuple[SymbolTable, List[Finding]]:
        table = SymbolTable(self.lexicon.builtins)
        findings: List[Finding] = []

        for i, tok in enumerate(tokens):
            if tok.kind != CodeTokenKind.IDENTIFIER:
                continue

            declared = self.declared_type(tokens, i, table)
            if declared is not None:
                if not table.declare(tok.text, declared):
                    findings.append(Finding(
                        category=ErrorCategory.SEMANTIC,
                        msg=f"Error Semántico (línea {tok.line}): el identificador '{tok.text}' ya fue declarado.",
                        line=tok.line,
                    ))
                continue

            if i >= 1 and tokens[i - 1].text == MEMBER_ACCESS:
                continue

            if tok.text not in table and tok.text not in self.lexicon.keywords:
                findings.append(Finding(
                    category=ErrorCategory.SEMANTIC,
                    msg=f"Error Semántico (línea {tok.line}): el identificador '{tok.text}' no ha sido declarado.",
                    line=tok.line,
                ))

        return table, findings


def check_terminators(tokens: List[CodeToken], lexicon: Lexicon) -> List[Finding]:
    """Marca líneas que no terminan en `;`, `{` o `}`.

    Se aceptan también las cabeceras de bloque: líneas que empiezan por una
    palabra reservada y terminan en `)` (`if (x)`, `void f(int a)`) y líneas
    que terminan en una palabra de bloque (`else`, `do`).
    """
    by_line: Dict[int, List[CodeToken]] = defaultdict(list)
    for tok in tokens:
        by_line[tok.line].append(tok)

    findings = []
    for line in sorted(by_line):
        first, last = by_line[line][0], by_line[line][-1]
        if last.text in STATEMENT_TERMINATORS:
            continue
        if last.text == ")" and first.kind == CodeTokenKind.KEYWORD:
            continue
        if last.kind == CodeTokenKind.KEYWORD and last.text in lexicon.block_keywords:
            continue
        findings.append(Finding(
            category=ErrorCategory.SYNTACTIC,
            msg=f"Error Sintáctico (línea {line}): posible ';' faltante al final de la línea.",
            line=line,
        ))
    return findings
