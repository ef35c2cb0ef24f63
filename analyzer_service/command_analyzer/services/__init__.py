"""Services layer - Analyzer pipelines."""

from .command_analyzer import CommandAnalyzer, get_command_analyzer
from .command_lexer import CommandLexer, CommandLexicalError
from .command_rules import CommandRule, build_grammar_table, classify
from .code_analyzer import CodeAnalyzer, get_code_analyzer
from .code_lexer import CodeLexer
from .symbol_table import SymbolTable

__all__ = [
    "CommandAnalyzer",
    "get_command_analyzer",
    "CommandLexer",
    "CommandLexicalError",
    "CommandRule",
    "build_grammar_table",
    "classify",
    "CodeAnalyzer",
    "get_code_analyzer",
    "CodeLexer",
    "SymbolTable",
]
