"""
command_analyzer.py — Servicio del validador de comandos
========================================================

Responsabilidad: orquestar léxico → tabla de gramática → resultado.

Política de agregación: un único veredicto por petición. La lista de
tokens se devuelve completa, sin filtrar.
"""

import logging

from ..domain.results import AnalysisResult, ErrorCategory, Status
from .command_lexer import CommandLexer, CommandLexicalError
from .command_rules import build_grammar_table, classify

logger = logging.getLogger(__name__)


class CommandAnalyzer:
    """
    Servicio que valida una invocación de comando.

    Flujo:
    1. CommandLexer → tokens (o fallo léxico)
    2. Tabla de gramática → veredicto
    3. AnalysisResult
    """

    def __init__(self):
        self.lexer = CommandLexer()
        self.table = build_grammar_table(self.lexer.lexicon)

    def analyze(self, command: str) -> AnalysisResult:
        """
        Analiza una línea de comandos.

        Args:
            command: Comando a validar

        Returns:
            AnalysisResult con estado, categoría, mensaje y tokens
        """
        try:
            tokens = self.lexer.tokenize(command)
        except CommandLexicalError as e:
            logger.debug("Fallo léxico en %r: %s", command, e)
            return AnalysisResult(
                status=Status.ERROR,
                error_type=ErrorCategory.LEXICAL,
                message=str(e),
                tokens=e.tokens,
            )
        except Exception as e:
            logger.exception("Error interno al tokenizar %r", command)
            return self._internal_error(e)

        try:
            verdict = classify(tokens, self.table)
        except Exception as e:
            logger.exception("Error interno al clasificar %r", command)
            return self._internal_error(e, tokens)

        logger.debug("Comando %r → %s", command, verdict.status.value)
        return AnalysisResult.from_verdict(verdict, tokens)

    @staticmethod
    def _internal_error(e: Exception, tokens=None) -> AnalysisResult:
        return AnalysisResult(
            status=Status.ERROR,
            error_type=ErrorCategory.INTERNAL,
            message=f"internal-error: {e}",
            tokens=tokens or [],
        )


# Instancia singleton para uso en routes
_command_analyzer = None


def get_command_analyzer() -> CommandAnalyzer:
    """Factory para obtener instancia singleton del servicio."""
    global _command_analyzer
    if _command_analyzer is None:
        _command_analyzer = CommandAnalyzer()
    return _command_analyzer
