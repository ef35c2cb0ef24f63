"""
Pruebas del analizador léxico de fragmentos
===========================================

Prioridad de alternativas, números de línea y tokens ERROR.
"""

import pytest

from command_analyzer.domain.tokens import CodeTokenKind as K
from command_analyzer.services.code_lexer import CodeLexer


def kinds_and_texts(code):
    return [(t.kind, t.text) for t in CodeLexer().tokenize(code)]


# ============================================================================
# CLASIFICACIÓN DE LEXEMAS
# ============================================================================

CLASSIFY_CASES = [
    ("while", K.KEYWORD),
    ("String", K.KEYWORD),
    ("_tmp1", K.IDENTIFIER),
    ("contador", K.IDENTIFIER),
    ("42", K.NUMBER),
    ("{", K.SYMBOL),
    (";", K.SYMBOL),
    ('"hola"', K.STRING),
    ('""', K.STRING),
    ("// nota", K.COMMENT),
    ("#", K.ERROR),
    ('"abierta', K.STRING),
]


@pytest.mark.parametrize("text, kind", CLASSIFY_CASES)
def test_classify(text, kind):
    assert CodeLexer().classify(text) == kind


# ============================================================================
# TOKENIZACIÓN
# ============================================================================

def test_simple_declaration():
    assert kinds_and_texts("int x = 10;") == [
        (K.KEYWORD, "int"),
        (K.IDENTIFIER, "x"),
        (K.SYMBOL, "="),
        (K.NUMBER, "10"),
        (K.SYMBOL, ";"),
    ]


def test_trailing_comment_takes_rest_of_line():
    tokens = kinds_and_texts("int x; // x = y + z")
    assert tokens[-1] == (K.COMMENT, "// x = y + z")
    assert len(tokens) == 4


def test_string_keeps_quotes_and_inner_spaces():
    tokens = kinds_and_texts('String s = "hola mundo";')
    assert (K.STRING, '"hola mundo"') in tokens


def test_unterminated_string_keeps_string_kind():
    assert kinds_and_texts('s = "abc') == [
        (K.IDENTIFIER, "s"),
        (K.SYMBOL, "="),
        (K.STRING, '"abc'),
    ]
    assert kinds_and_texts('String s = "abc;')[-1] == (K.STRING, '"abc;')


def test_unknown_characters_become_one_error_run():
    assert kinds_and_texts("int @x;") == [(K.KEYWORD, "int"), (K.ERROR, "@x;")]


def test_digits_then_word_split():
    assert kinds_and_texts("123abc") == [(K.NUMBER, "123"), (K.IDENTIFIER, "abc")]


def test_line_numbers_are_one_based():
    tokens = CodeLexer().tokenize("int a;\n\nint b;")
    assert [(t.text, t.line) for t in tokens if t.kind == K.IDENTIFIER] == [("a", 1), ("b", 3)]


LINE_BREAK_CASES = [
    ("int a;\x0cint b;", [("a", 1), ("b", 1)]),
    ("int a;\x0bint b;", [("a", 1), ("b", 1)]),
    ("int a;\u2028int b;", [("a", 1), ("b", 1)]),
    ("int a;\r\nint b;", [("a", 1), ("b", 2)]),
]


@pytest.mark.parametrize("code, expected", LINE_BREAK_CASES)
def test_only_newline_starts_a_new_line(code, expected):
    tokens = CodeLexer().tokenize(code)
    assert [(t.text, t.line) for t in tokens if t.kind == K.IDENTIFIER] == expected


def test_carriage_return_is_not_part_of_a_lexeme():
    tokens = CodeLexer().tokenize("int a;\r\nint b;")
    assert [t.text for t in tokens] == ["int", "a", ";", "int", "b", ";"]


def test_empty_input_yields_no_tokens():
    assert CodeLexer().tokenize("") == []
    assert CodeLexer().tokenize("   \n\t") == []


def test_tokenize_is_deterministic():
    code = 'int[] xs = {1, 2};\nSystem.out.println("ok"); // fin\n$'
    lexer = CodeLexer()
    assert lexer.tokenize(code) == lexer.tokenize(code)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
