"""Tabla de símbolos del analizador de fragmentos.

Se construye nueva en cada análisis y solo crece: las entradas nunca se
eliminan durante una ejecución.
"""

from typing import Dict, Iterator, Mapping, Optional


class SymbolTable:
    """Mapa identificador → tipo declarado."""

    def __init__(self, builtins: Optional[Mapping[str, str]] = None):
        self._symbols: Dict[str, str] = dict(builtins or {})

    def declare(self, name: str, declared_type: str) -> bool:
        """Registra `name`. Devuelve False si ya estaba declarado (no sobrescribe)."""
        if name in self._symbols:
            return False
        self._symbols[name] = declared_type
        return True

    def type_of(self, name: str) -> Optional[str]:
        return self._symbols.get(name)

    def snapshot(self) -> Dict[str, str]:
        return dict(self._symbols)

    def __contains__(self, name: object) -> bool:
        return name in self._symbols

    def __iter__(self) -> Iterator[str]:
        return iter(self._symbols)

    def __len__(self) -> int:
        return len(self._symbols)
