"""Modelos de tokens de ambos analizadores.

Define los tipos de token y las clases Pydantic inmutables que los
representan:
- CommandTokenKind / CommandToken: validador de comandos git
- CodeTokenKind / CodeToken: analizador de fragmentos de código

El valor entero de `CommandTokenKind` es el formato que consume el frontend.
"""

from enum import Enum, IntEnum

from pydantic import BaseModel, ConfigDict, Field


# TOKENS DEL VALIDADOR DE COMANDOS

class CommandTokenKind(IntEnum):
    """Categoría léxica de un token de comando."""
    UNKNOWN = 0
    COMMAND = 1
    FLAG = 2
    PARAM = 3


class CommandToken(BaseModel):
    """
    Token de una invocación de línea de comandos.

    Atributos:
        type (CommandTokenKind): categoría léxica.
        value (str): lexema sin comillas.
    """
    model_config = ConfigDict(frozen=True)

    type: CommandTokenKind
    value: str


# ---------------------------------------------------------------------------
# TOKENS DEL ANALIZADOR DE FRAGMENTOS
# ---------------------------------------------------------------------------

class CodeTokenKind(str, Enum):
    """Categoría léxica de un token de código."""
    KEYWORD = "KEYWORD"
    IDENTIFIER = "IDENTIFIER"
    NUMBER = "NUMBER"
    SYMBOL = "SYMBOL"
    STRING = "STRING"
    COMMENT = "COMMENT"
    ERROR = "ERROR"


# Categorías que se muestran y se contabilizan en el resultado
DISPLAY_KINDS = (
    CodeTokenKind.KEYWORD,
    CodeTokenKind.IDENTIFIER,
    CodeTokenKind.NUMBER,
    CodeTokenKind.SYMBOL,
    CodeTokenKind.STRING,
)


class CodeToken(BaseModel):
    """
    Token de un fragmento de código.

    Atributos:
        kind (CodeTokenKind): categoría léxica.
        text (str): lexema original.
        line (int): número de línea (1-based).
    """
    model_config = ConfigDict(frozen=True)

    kind: CodeTokenKind
    text: str
    line: int = Field(ge=1)
