"""
Pruebas de la tabla de gramática de comandos git
================================================

Cada caso recorre el pipeline completo (léxico → tabla → resultado) y
verifica el estado final y la categoría del hallazgo.
"""

import pytest

from command_analyzer.domain.results import ErrorCategory, Status
from command_analyzer.services.command_analyzer import CommandAnalyzer, get_command_analyzer
from command_analyzer.services.command_lexer import CommandLexer
from command_analyzer.services.command_rules import build_grammar_table, classify

VALID = (Status.VALID, None)
WARNING = (Status.WARNING, ErrorCategory.SEMANTIC)
SYNTAX = (Status.ERROR, ErrorCategory.SYNTACTIC)
LEXICAL = (Status.ERROR, ErrorCategory.LEXICAL)


# ============================================================================
# CASOS DE PRUEBA
# ============================================================================

COMMAND_CASES = [
    # ========== init / status ==========
    {"command": "git init", "expected": VALID},
    {"command": "git init extra", "expected": SYNTAX},
    {"command": "git status", "expected": VALID},
    {"command": "git status -s", "expected": SYNTAX},

    # ========== clone ==========
    {"command": "git clone https://github.com/org/repo.git", "expected": VALID},
    {"command": "git clone git@github.com:org/repo.git", "expected": VALID},
    {"command": "git clone ftp://x", "expected": WARNING},
    {"command": "git clone", "expected": SYNTAX},
    {"command": "git clone a b", "expected": SYNTAX},

    # ========== config ==========
    {"command": "git config --list", "expected": VALID},
    {"command": 'git config --global user.name "Ana"', "expected": VALID},
    {"command": "git config --global user.email ana@example.com", "expected": VALID},
    {"command": "git config --global user.name", "expected": SYNTAX},
    {"command": 'git config --global user.name ""', "expected": WARNING},
    {"command": "git config --global core.editor vim", "expected": SYNTAX},

    # ========== add ==========
    {"command": "git add archivo.txt", "expected": VALID},
    {"command": "git add .", "expected": WARNING},
    {"command": "git add", "expected": SYNTAX},
    {"command": "git add -A", "expected": SYNTAX},

    # ========== reset ==========
    {"command": "git reset archivo.txt", "expected": VALID},
    {"command": "git reset --hard", "expected": WARNING},
    {"command": "git reset --soft HEAD~1", "expected": VALID},
    {"command": "git reset --mixed", "expected": SYNTAX},

    # ========== commit ==========
    {"command": 'git commit -m "feat: nuevo componente"', "expected": VALID},
    {"command": 'git commit -am "fix"', "expected": VALID},
    {"command": 'git commit -m ""', "expected": WARNING},
    {"command": 'git commit "falta el flag -m"', "expected": SYNTAX},
    {"command": "git commit --amend", "expected": VALID},
    {"command": "git commit", "expected": SYNTAX},

    # ========== push ==========
    {"command": "git push", "expected": VALID},
    {"command": "git push origin main", "expected": VALID},
    {"command": "git push origin", "expected": SYNTAX},
    {"command": "git push --force", "expected": WARNING},
    {"command": "git push origin --force main", "expected": WARNING},
    {"command": "git push origin main extra", "expected": SYNTAX},

    # ========== branch ==========
    {"command": "git branch", "expected": VALID},
    {"command": "git branch feature/login", "expected": VALID},
    {"command": "git branch -d feature/login", "expected": VALID},
    {"command": "git branch -d main", "expected": WARNING},
    {"command": "git branch -d master", "expected": WARNING},
    {"command": "git branch -D feature", "expected": SYNTAX},

    # ========== checkout ==========
    {"command": "git checkout", "expected": SYNTAX},
    {"command": "git checkout develop", "expected": VALID},
    {"command": "git checkout -b develop", "expected": VALID},
    {"command": "git checkout -x develop", "expected": SYNTAX},

    # ========== merge ==========
    {"command": "git merge develop", "expected": VALID},
    {"command": "git merge", "expected": SYNTAX},

    # ========== formas generales ==========
    {"command": "git", "expected": SYNTAX},
    {"command": "git rebase main", "expected": SYNTAX},
    {"command": "svn commit", "expected": LEXICAL},
    {"command": "", "expected": LEXICAL},
]


@pytest.mark.parametrize("case", COMMAND_CASES, ids=[c["command"] or "<vacío>" for c in COMMAND_CASES])
def test_command_grammar(case):
    result = CommandAnalyzer().analyze(case["command"])
    assert (result.status, result.error_type) == case["expected"], result.message


# ============================================================================
# MENSAJES Y TOKENS
# ============================================================================

def test_incomplete_command_message():
    result = CommandAnalyzer().analyze("git")
    assert result.message == "Error de Sintaxis: Comando 'git' incompleto."


def test_unrecognized_subcommand_names_it():
    result = CommandAnalyzer().analyze("git rebase main")
    assert "git rebase" in result.message


def test_push_missing_branch_message():
    result = CommandAnalyzer().analyze("git push origin")
    assert "Falta la rama" in result.message


def test_result_keeps_full_token_list():
    result = CommandAnalyzer().analyze("git push origin --force main")
    assert [t.value for t in result.tokens] == ["git", "push", "origin", "--force", "main"]


def test_lexical_result_carries_unknown_token():
    result = CommandAnalyzer().analyze("hg status")
    assert result.status == Status.ERROR
    assert result.error_type == ErrorCategory.LEXICAL
    assert [t.value for t in result.tokens] == ["hg"]


# ============================================================================
# PROPIEDADES DE LA TABLA
# ============================================================================

def test_classify_is_stateless():
    """Clasificar dos veces la misma secuencia produce el mismo veredicto."""
    tokens = CommandLexer().tokenize("git branch -d main")
    table = build_grammar_table()

    assert classify(tokens, table) == classify(tokens, table)


def test_grammar_table_is_read_only():
    table = build_grammar_table()
    with pytest.raises(TypeError):
        table["rebase"] = table["merge"]


def test_every_known_subcommand_has_a_rule():
    lexer = CommandLexer()
    assert set(build_grammar_table()) == set(lexer.lexicon.subcommands)


# ============================================================================
# ERRORES INTERNOS
# ============================================================================

def test_lexer_failure_becomes_internal_error(monkeypatch):
    def boom(self, command):
        raise RuntimeError("fallo del lexer")

    monkeypatch.setattr(CommandLexer, "tokenize", boom)
    result = CommandAnalyzer().analyze("git init")

    assert result.status == Status.ERROR
    assert result.error_type == ErrorCategory.INTERNAL
    assert "fallo del lexer" in result.message
    assert result.tokens == []


def test_rule_failure_keeps_tokens(monkeypatch):
    def boom(tokens, table=None):
        raise RuntimeError("fallo de la regla")

    monkeypatch.setattr("command_analyzer.services.command_analyzer.classify", boom)
    result = CommandAnalyzer().analyze("git init")

    assert result.status == Status.ERROR
    assert result.error_type == ErrorCategory.INTERNAL
    assert "fallo de la regla" in result.message
    assert [t.value for t in result.tokens] == ["git", "init"]


def test_analyzer_factory_returns_singleton():
    assert get_command_analyzer() is get_command_analyzer()


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
