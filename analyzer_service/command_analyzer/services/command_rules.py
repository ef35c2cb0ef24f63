"""
command_rules.py — Tabla de gramática del validador de comandos
===============================================================

Cada subcomando tiene una regla con un único método `evaluate(tokens)`
que enumera las formas aceptadas (cantidad de tokens y categoría/valor por
posición) y devuelve un `Verdict`:

- Correcto: la forma coincide y no hay nada que advertir.
- Advertencia (semántica): la forma es legal pero la operación es
  riesgosa (reescrituras destructivas, push forzado, staging amplio,
  borrado de ramas protegidas, mensajes o valores vacíos).
- Error (sintáctico): la forma no está enumerada para ese subcomando.

`classify()` despacha por el valor del segundo token.
"""

from types import MappingProxyType
from typing import List, Mapping, Optional

from ..domain.results import Verdict
from ..domain.tokens import CommandToken, CommandTokenKind
from ..infrastructure.grammar_loader import Lexicon, get_lexicon

PARAM = CommandTokenKind.PARAM
FLAG = CommandTokenKind.FLAG


def _kind_at(tokens: List[CommandToken], i: int, kind: CommandTokenKind) -> bool:
    return len(tokens) > i and tokens[i].type == kind


def _value_at(tokens: List[CommandToken], i: int, *values: str) -> bool:
    return len(tokens) > i and tokens[i].value in values


class CommandRule:
    """Regla base: una entrada de la tabla de gramática."""

    name: str = ""

    def __init__(self, lexicon: Lexicon):
        self.lexicon = lexicon

    def evaluate(self, tokens: List[CommandToken]) -> Verdict:
        raise NotImplementedError


class InitRule(CommandRule):
    name = "init"

    def evaluate(self, tokens):
        if len(tokens) > 2:
            return Verdict.syntax_error("Error de Sintaxis: `git init` no admite parámetros adicionales.")
        return Verdict.valid("Comando `git init` válido.")


class StatusRule(CommandRule):
    name = "status"

    def evaluate(self, tokens):
        if len(tokens) > 2:
            return Verdict.syntax_error("Error de Sintaxis: `git status` no admite parámetros.")
        return Verdict.valid("Comando `git status` válido.")


class CloneRule(CommandRule):
    name = "clone"

    def evaluate(self, tokens):
        if len(tokens) != 3 or not _kind_at(tokens, 2, PARAM):
            return Verdict.syntax_error(
                "Error de Sintaxis: `git clone` requiere exactamente una URL de repositorio."
            )
        if not tokens[2].value.startswith(self.lexicon.url_prefixes):
            return Verdict.warning("Advertencia Semántica: El parámetro no parece una URL válida.")
        return Verdict.valid("Comando `git clone` válido.")


class ConfigRule(CommandRule):
    name = "config"

    def evaluate(self, tokens):
        n = len(tokens)
        if n == 3 and tokens[2].value == "--list":
            return Verdict.valid("Comando `git config --list` válido.")

        is_global_key = (
            n >= 4
            and tokens[2].value == "--global"
            and tokens[3].value in self.lexicon.config_keys
        )
        if n == 4 and is_global_key:
            return Verdict.syntax_error("Error de Sintaxis: Falta el valor para la configuración.")
        if n == 5 and is_global_key and _kind_at(tokens, 4, PARAM):
            if tokens[4].value == "":
                return Verdict.warning(
                    "Advertencia Semántica: El valor para la configuración no debe estar vacío."
                )
            return Verdict.valid("Comando `git config` válido.")
        return Verdict.syntax_error("Error de Sintaxis: Uso incorrecto de `git config`.")


class AddRule(CommandRule):
    name = "add"

    def evaluate(self, tokens):
        if len(tokens) < 3:
            return Verdict.syntax_error("Error de Sintaxis: Falta el archivo a añadir.")
        if not _kind_at(tokens, 2, PARAM):
            return Verdict.syntax_error(
                "Error de Sintaxis: `git add` requiere un parámetro (ej: '.', 'archivo.txt')."
            )
        if tokens[2].value == ".":
            return Verdict.warning(
                "Advertencia Semántica: `git add .` puede incluir archivos no deseados. "
                "Se recomienda revisar con `git status` primero."
            )
        return Verdict.valid("Comando `git add` válido.")


class ResetRule(CommandRule):
    name = "reset"

    def evaluate(self, tokens):
        n = len(tokens)
        if n == 3:
            if _kind_at(tokens, 2, PARAM):
                return Verdict.valid("Comando `git reset <archivo>` válido para quitarlo del staging.")
            if tokens[2].value == "--hard":
                return Verdict.warning(
                    "Advertencia Semántica: `git reset --hard` borra los cambios locales sin "
                    "recuperación. Es una operación muy destructiva."
                )
        if n == 4 and tokens[2].value == "--soft" and _kind_at(tokens, 3, PARAM):
            return Verdict.valid("Comando `git reset --soft` válido.")
        return Verdict.syntax_error("Error de Sintaxis: Uso no reconocido de `git reset`.")


class CommitRule(CommandRule):
    name = "commit"

    def evaluate(self, tokens):
        n = len(tokens)
        if n == 3 and _kind_at(tokens, 2, PARAM):
            return Verdict.syntax_error("Error de Sintaxis: Falta el flag -m.")
        if n == 3 and tokens[2].value == "--amend":
            return Verdict.valid("Comando `git commit --amend` válido.")
        if n == 4 and _value_at(tokens, 2, "-m", "-am") and _kind_at(tokens, 3, PARAM):
            if tokens[3].value == "":
                return Verdict.warning(
                    "Advertencia Semántica: Realizar un commit sin un mensaje descriptivo es una mala práctica."
                )
            return Verdict.valid("Comando `git commit` válido.")
        return Verdict.syntax_error("Error de Sintaxis: Uso incorrecto de `git commit`.")


class PushRule(CommandRule):
    name = "push"

    def evaluate(self, tokens):
        n = len(tokens)
        if n == 3 and _kind_at(tokens, 2, PARAM):
            return Verdict.syntax_error(
                "Error de Sintaxis: Falta la rama a subir (ej: git push origin main)."
            )

        well_formed = (
            n == 2
            or (n == 4 and _kind_at(tokens, 2, PARAM) and _kind_at(tokens, 3, PARAM))
            or (n == 3 and _kind_at(tokens, 2, FLAG))
            or (n == 5 and _kind_at(tokens, 3, FLAG))
        )
        if not well_formed:
            return Verdict.syntax_error("Error de Sintaxis: Estructura de `git push` no reconocida.")

        if any(t.value == "--force" for t in tokens):
            return Verdict.warning(
                "Advertencia Semántica: Forzar el push puede sobrescribir cambios remotos. "
                "Úsalo con extrema precaución."
            )
        return Verdict.valid("Comando `git push` válido.")


class BranchRule(CommandRule):
    name = "branch"

    def evaluate(self, tokens):
        n = len(tokens)
        if n == 2:
            return Verdict.valid("Comando `git branch` (listar) válido.")
        if n == 3 and _kind_at(tokens, 2, PARAM):
            return Verdict.valid("Comando `git branch <nombre-rama>` (crear) válido.")
        if n == 4 and tokens[2].value == "-d" and _kind_at(tokens, 3, PARAM):
            if tokens[3].value in self.lexicon.protected_branches:
                return Verdict.warning(
                    "Advertencia Semántica: Borrar la rama principal puede afectar el proyecto."
                )
            return Verdict.valid("Comando `git branch -d` (eliminar) válido.")
        return Verdict.syntax_error("Error de Sintaxis: Uso incorrecto de `git branch`.")


class CheckoutRule(CommandRule):
    name = "checkout"

    def evaluate(self, tokens):
        n = len(tokens)
        if n == 2:
            return Verdict.syntax_error("Error de Sintaxis: Falta la rama a la que se quiere cambiar.")
        if n == 3 and _kind_at(tokens, 2, PARAM):
            return Verdict.valid("Comando `git checkout <rama>` (cambiar) válido.")
        if n == 4 and tokens[2].value == "-b" and _kind_at(tokens, 3, PARAM):
            return Verdict.valid("Comando `git checkout -b` (crear y cambiar) válido.")
        return Verdict.syntax_error("Error de Sintaxis: Uso incorrecto de `git checkout`.")


class MergeRule(CommandRule):
    name = "merge"

    def evaluate(self, tokens):
        if len(tokens) != 3 or not _kind_at(tokens, 2, PARAM):
            return Verdict.syntax_error(
                "Error de Sintaxis: `git merge` requiere el nombre de una rama para unir."
            )
        return Verdict.valid("Comando `git merge` válido.")


RULE_CLASSES = (
    InitRule,
    StatusRule,
    CloneRule,
    ConfigRule,
    AddRule,
    ResetRule,
    CommitRule,
    PushRule,
    BranchRule,
    CheckoutRule,
    MergeRule,
)


def build_grammar_table(lexicon: Optional[Lexicon] = None) -> Mapping[str, CommandRule]:
    """Construye la tabla subcomando → regla (de solo lectura)."""
    lexicon = lexicon or get_lexicon()
    return MappingProxyType({cls.name: cls(lexicon) for cls in RULE_CLASSES})


def classify(tokens: List[CommandToken], table: Optional[Mapping[str, CommandRule]] = None) -> Verdict:
    """
    Clasifica una secuencia de tokens ya validada léxicamente.

    Args:
        tokens: Tokens producidos por `CommandLexer`
        table: Tabla de gramática (por defecto la construida desde el léxico)

    Returns:
        Veredicto único para el comando
    """
    if len(tokens) < 2:
        return Verdict.syntax_error("Error de Sintaxis: Comando 'git' incompleto.")

    table = table if table is not None else build_grammar_table()
    subcommand = tokens[1].value
    rule = table.get(subcommand)
    if rule is None:
        return Verdict.syntax_error(
            f"Error de Sintaxis: Comando 'git {subcommand}' no es reconocido por este analizador."
        )
    return rule.evaluate(tokens)
