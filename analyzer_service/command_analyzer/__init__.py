"""Analyzer Service Application.

Microservicio de análisis léxico, sintáctico y semántico de dos tipos de
entrada: invocaciones de `git` y fragmentos de código tipo Java.

Arquitectura:
    - api/: FastAPI endpoints (HTTP layer)
    - domain/: Tokens, veredictos y resultados
    - infrastructure/: Carga del léxico (grammar/lexicon.json)
    - services/: Analizadores (léxico → clasificación → diagnóstico)
    - schemas.py: Request/Response models (Pydantic)
    - config.py: Settings (pydantic-settings)

Usage:
    uvicorn command_analyzer.main:app --reload
"""

__version__ = "1.0.0"
