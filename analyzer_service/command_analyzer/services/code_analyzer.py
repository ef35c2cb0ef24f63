"""
code_analyzer.py — Servicio del analizador de fragmentos de código
==================================================================

Responsabilidad: orquestar léxico → verificaciones → resultado agregado.

Política de agregación: listas acumuladas. Cada token ERROR produce un
mensaje léxico; las pasadas de balance, declaraciones/usos y (opcional)
terminadores producen mensajes sintácticos y semánticos. No se detiene en
el primer hallazgo.
"""

import logging
from collections import Counter
from typing import Dict, List, Optional

from ..config import settings
from ..domain.results import CodeAnalysisResult, ErrorCategory, Status
from ..domain.tokens import DISPLAY_KINDS, CodeToken, CodeTokenKind
from .code_checks import DeclarationChecker, Finding, check_balance, check_terminators
from .code_lexer import CodeLexer

logger = logging.getLogger(__name__)

HIDDEN_KINDS = frozenset({CodeTokenKind.COMMENT, CodeTokenKind.ERROR})


def lexical_messages(tokens: List[CodeToken]) -> List[str]:
    return [
        f"Error Léxico (línea {t.line}): símbolo no reconocido '{t.text}'."
        for t in tokens
        if t.kind == CodeTokenKind.ERROR
    ]


def count_kinds(tokens: List[CodeToken]) -> Dict[str, int]:
    counter = Counter(t.kind for t in tokens)
    return {kind.value: counter.get(kind, 0) for kind in DISPLAY_KINDS}


def _summary(total: int) -> str:
    if total == 0:
        return "Análisis completado: el código es válido."
    if total == 1:
        return "Análisis completado: se encontró 1 error."
    return f"Análisis completado: se encontraron {total} errores."


class CodeAnalyzer:
    """
    Servicio que analiza un fragmento de código.

    Flujo:
    1. CodeLexer → tokens con línea
    2. Filtrado de comentarios/errores + conteo por categoría
    3. Balance de delimitadores, declaraciones y usos, terminadores
    4. CodeAnalysisResult
    """

    def __init__(self, require_semicolons: Optional[bool] = None):
        self.lexer = CodeLexer()
        self.declarations = DeclarationChecker(self.lexer.lexicon)
        self.require_semicolons = (
            settings.REQUIRE_SEMICOLONS if require_semicolons is None else require_semicolons
        )

    def check(self, tokens: List[CodeToken]) -> List[Finding]:
        """Ejecuta las pasadas sobre los tokens visibles."""
        findings = check_balance(tokens)
        _, declaration_findings = self.declarations.run(tokens)
        findings.extend(declaration_findings)
        if self.require_semicolons:
            findings.extend(check_terminators(tokens, self.lexer.lexicon))
        return findings

    def analyze(self, code: str) -> CodeAnalysisResult:
        """
        Analiza un fragmento de código.

        Args:
            code: Fragmento a analizar

        Returns:
            CodeAnalysisResult con tokens visibles, conteos y listas de errores
        """
        try:
            tokens = self.lexer.tokenize(code)
            visible = [t for t in tokens if t.kind not in HIDDEN_KINDS]

            lexical_errors = lexical_messages(tokens)
            findings = self.check(visible)
        except Exception as e:
            logger.exception("Error interno al analizar el fragmento")
            return CodeAnalysisResult(
                status=Status.ERROR,
                error_type=ErrorCategory.INTERNAL,
                message=f"internal-error: {e}",
            )

        syntax_errors = [f.msg for f in findings if f.category == ErrorCategory.SYNTACTIC]
        semantic_errors = [f.msg for f in findings if f.category == ErrorCategory.SEMANTIC]

        error_type = None
        for category, messages in (
            (ErrorCategory.LEXICAL, lexical_errors),
            (ErrorCategory.SYNTACTIC, syntax_errors),
            (ErrorCategory.SEMANTIC, semantic_errors),
        ):
            if messages:
                error_type = category
                break

        total = len(lexical_errors) + len(syntax_errors) + len(semantic_errors)
        logger.debug("Fragmento analizado: %d tokens, %d errores", len(visible), total)

        return CodeAnalysisResult(
            status=Status.ERROR if total else Status.VALID,
            error_type=error_type,
            message=_summary(total),
            tokens=visible,
            counts=count_kinds(visible),
            lexical_errors=lexical_errors,
            syntax_errors=syntax_errors,
            semantic_errors=semantic_errors,
        )


# Instancia singleton para uso en routes
_code_analyzer = None


def get_code_analyzer() -> CodeAnalyzer:
    """Factory para obtener instancia singleton del servicio."""
    global _code_analyzer
    if _code_analyzer is None:
        _code_analyzer = CodeAnalyzer()
    return _code_analyzer
