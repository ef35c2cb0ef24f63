"""
Pruebas del cargador de léxico
==============================

Ruta del archivo, caché de una sola carga y error cuando falta el JSON.
"""

import pytest

from command_analyzer.infrastructure.grammar_loader import LexiconLoader, get_lexicon


def test_lexicon_file_ships_with_package():
    path = LexiconLoader.get_path()
    assert path.name == "lexicon.json"
    assert path.exists()


def test_lexicon_contents():
    lexicon = get_lexicon()

    assert lexicon.root_command == "git"
    assert {"init", "push", "merge"} <= lexicon.subcommands
    assert {"main", "master"} == lexicon.protected_branches


def test_lexicon_is_loaded_once():
    assert LexiconLoader.load() is LexiconLoader.load()
    assert get_lexicon() is LexiconLoader.load()


def test_missing_lexicon_raises(monkeypatch, tmp_path):
    missing = tmp_path / "lexicon.json"
    monkeypatch.setattr(LexiconLoader, "_lexicon_path", missing)
    LexiconLoader.load.cache_clear()
    try:
        assert LexiconLoader.get_path() == missing
        with pytest.raises(FileNotFoundError, match="Archivo de léxico no encontrado"):
            LexiconLoader.load()
    finally:
        LexiconLoader.load.cache_clear()


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
