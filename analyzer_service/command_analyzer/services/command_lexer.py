"""
command_lexer.py — Analizador léxico del validador de comandos
==============================================================

Convierte una línea de comandos en una secuencia de `CommandToken`.

Reglas:
- La entrada se separa por espacios respetando los tramos entre comillas
  dobles. Las comillas nunca forman parte del lexema y un tramo vacío
  (`""`) produce un lexema vacío.
- El primer lexema debe ser el comando raíz ("git"); si no lo es, el
  análisis falla con un error léxico que transporta el token ofensivo.
- El segundo lexema es COMMAND si es un subcomando conocido.
- El resto es FLAG si empieza por "-" o PARAM en otro caso.
"""

from typing import List, Optional

from ..domain.tokens import CommandToken, CommandTokenKind
from ..infrastructure.grammar_loader import Lexicon, get_lexicon


class CommandLexicalError(ValueError):
    """Fallo léxico del comando: corta el pipeline antes de clasificar.

    Attributes:
        tokens: Tokens producidos hasta el fallo (el token ofensivo, si existe)
    """

    def __init__(self, message: str, tokens: Optional[List[CommandToken]] = None):
        super().__init__(message)
        self.tokens: List[CommandToken] = tokens or []


def split_command(text: str) -> List[str]:
    """Separa la entrada en lexemas con un escáner de dos estados.

    Estados: fuera de comillas / dentro de comillas. Un espacio fuera de
    comillas cierra el lexema actual; la comilla doble cambia de estado.
    Una comilla sin cerrar se extiende hasta el final de la entrada.
    """
    parts: List[str] = []
    current: List[str] = []
    in_quote = False
    started = False

    for ch in text:
        if ch == '"':
            in_quote = not in_quote
            started = True
        elif ch.isspace() and not in_quote:
            if started:
                parts.append("".join(current))
                current = []
                started = False
        else:
            current.append(ch)
            started = True

    if started:
        parts.append("".join(current))
    return parts


class CommandLexer:
    """Tokenizador de invocaciones de línea de comandos."""

    def __init__(self, lexicon: Optional[Lexicon] = None):
        self.lexicon = lexicon or get_lexicon()

    def classify(self, index: int, part: str) -> CommandTokenKind:
        """Asigna la categoría de un lexema según su posición."""
        if index == 0:
            return CommandTokenKind.COMMAND
        if index == 1 and part in self.lexicon.subcommands:
            return CommandTokenKind.COMMAND
        if part.startswith("-"):
            return CommandTokenKind.FLAG
        return CommandTokenKind.PARAM

    def tokenize(self, command: str) -> List[CommandToken]:
        """
        Tokeniza una línea de comandos.

        Args:
            command: Texto introducido por el usuario

        Returns:
            Lista de tokens en orden de aparición

        Raises:
            CommandLexicalError: Si la entrada está vacía o no empieza por
                el comando raíz
        """
        trimmed = command.strip()
        if not trimmed:
            raise CommandLexicalError("El comando está vacío.")

        parts = split_command(trimmed)
        root = self.lexicon.root_command
        if not parts or parts[0] != root:
            first = parts[0] if parts else ""
            raise CommandLexicalError(
                f"Error Léxico: Se esperaba el comando '{root}', pero se encontró '{first}'.",
                [CommandToken(type=CommandTokenKind.UNKNOWN, value=first)],
            )

        return [
            CommandToken(type=self.classify(i, part), value=part)
            for i, part in enumerate(parts)
        ]
