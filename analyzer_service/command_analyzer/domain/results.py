"""Modelos de veredicto y de resultado del análisis.

- Status / ErrorCategory: valores que viajan en el JSON de respuesta
- Verdict: salida de una regla de la tabla de gramática
- AnalysisResult: resultado del validador de comandos (un solo veredicto)
- CodeAnalysisResult: resultado del analizador de fragmentos (listas
  acumuladas de errores léxicos, sintácticos y semánticos)
"""

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .tokens import CodeToken, CommandToken


class Status(str, Enum):
    """Estado final de un análisis."""
    VALID = "Correcto"
    WARNING = "Advertencia"
    ERROR = "Error"


class ErrorCategory(str, Enum):
    """Etapa del pipeline que produjo el hallazgo."""
    LEXICAL = "Léxico"
    SYNTACTIC = "Sintáctico"
    SEMANTIC = "Semántico"
    INTERNAL = "Interno"


class Verdict(BaseModel):
    """
    Veredicto de una regla sobre una secuencia de tokens.

    Atributos:
        status (Status): Correcto, Advertencia o Error.
        category (Optional[ErrorCategory]): categoría del hallazgo (None si es válido).
        message (str): mensaje legible.
    """
    model_config = ConfigDict(frozen=True)

    status: Status
    category: Optional[ErrorCategory] = None
    message: str

    @classmethod
    def valid(cls, message: str) -> "Verdict":
        return cls(status=Status.VALID, message=message)

    @classmethod
    def warning(cls, message: str) -> "Verdict":
        """Operación legal pero riesgosa: advertencia semántica."""
        return cls(status=Status.WARNING, category=ErrorCategory.SEMANTIC, message=message)

    @classmethod
    def syntax_error(cls, message: str) -> "Verdict":
        return cls(status=Status.ERROR, category=ErrorCategory.SYNTACTIC, message=message)


class AnalysisResult(BaseModel):
    """
    Resultado del validador de comandos.

    Atributos:
        status (Status): estado final.
        error_type (Optional[ErrorCategory]): se serializa como `errorType`
            y se omite cuando no hay error.
        message (str): mensaje del veredicto.
        tokens (List[CommandToken]): tokens completos, sin filtrar.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    status: Status
    error_type: Optional[ErrorCategory] = Field(default=None, alias="errorType")
    message: str
    tokens: List[CommandToken] = Field(default_factory=list)

    @classmethod
    def from_verdict(cls, verdict: Verdict, tokens: List[CommandToken]) -> "AnalysisResult":
        return cls(
            status=verdict.status,
            error_type=verdict.category,
            message=verdict.message,
            tokens=tokens,
        )


class CodeAnalysisResult(BaseModel):
    """
    Resultado del analizador de fragmentos de código.

    Atributos:
        status (Status): Error si alguna lista de errores no está vacía.
        error_type (Optional[ErrorCategory]): primera categoría con errores
            en el orden Léxico, Sintáctico, Semántico.
        message (str): resumen del análisis.
        tokens (List[CodeToken]): tokens sin comentarios ni errores léxicos.
        counts (Dict[str, int]): cantidad de tokens por categoría.
        lexical_errors / syntax_errors / semantic_errors (List[str]):
            mensajes acumulados por categoría.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    status: Status
    error_type: Optional[ErrorCategory] = Field(default=None, alias="errorType")
    message: str
    tokens: List[CodeToken] = Field(default_factory=list)
    counts: Dict[str, int] = Field(default_factory=dict)
    lexical_errors: List[str] = Field(default_factory=list, alias="lexicalErrors")
    syntax_errors: List[str] = Field(default_factory=list, alias="syntaxErrors")
    semantic_errors: List[str] = Field(default_factory=list, alias="semanticErrors")
