"""
grammar_loader.py — Carga del léxico de los analizadores
========================================================

Responsabilidad única: leer `grammar/lexicon.json` una sola vez por proceso
y exponerlo como un objeto inmutable (conjuntos congelados).
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Dict, FrozenSet, Tuple

from pydantic import BaseModel, ConfigDict


class Lexicon(BaseModel):
    """Conjuntos de palabras clave y comandos conocidos.

    Atributos:
        root_command: comando raíz esperado ("git").
        subcommands: subcomandos reconocidos por la tabla de gramática.
        protected_branches: ramas cuyo borrado genera advertencia.
        config_keys: claves admitidas por `git config --global`.
        url_prefixes: prefijos aceptados como URL de repositorio.
        keywords: palabras reservadas del analizador de fragmentos.
        type_keywords: palabras reservadas que introducen una declaración.
        class_keyword: palabra reservada que declara una clase.
        block_keywords: palabras que abren cabeceras de bloque.
        symbols: símbolos de un solo carácter.
        builtins: identificadores predeclarados (nombre → tipo).
    """

    model_config = ConfigDict(frozen=True)

    root_command: str
    subcommands: FrozenSet[str]
    protected_branches: FrozenSet[str]
    config_keys: FrozenSet[str]
    url_prefixes: Tuple[str, ...]
    keywords: FrozenSet[str]
    type_keywords: FrozenSet[str]
    class_keyword: str
    block_keywords: FrozenSet[str]
    symbols: FrozenSet[str]
    builtins: Dict[str, str]


class LexiconLoader:
    """Cargador del léxico con cache."""

    _lexicon_path = Path(__file__).parents[1] / "grammar" / "lexicon.json"

    @classmethod
    @lru_cache(maxsize=1)
    def load(cls) -> Lexicon:
        """
        Carga el léxico desde el archivo JSON.

        Returns:
            Lexicon: léxico inmutable

        Raises:
            FileNotFoundError: Si no se encuentra el archivo
        """
        if not cls._lexicon_path.exists():
            raise FileNotFoundError(
                f"Archivo de léxico no encontrado: {cls._lexicon_path}"
            )

        with open(cls._lexicon_path, "r", encoding="utf-8") as f:
            return Lexicon.model_validate(json.load(f))

    @classmethod
    def get_path(cls) -> Path:
        """Retorna la ruta del archivo de léxico."""
        return cls._lexicon_path


def get_lexicon() -> Lexicon:
    """Atajo funcional para obtener el léxico cacheado."""
    return LexiconLoader.load()
