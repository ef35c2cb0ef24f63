"""
Punto de entrada principal del servicio de análisis.

Expone una función `create_app` para facilitar el testeo y la integración
con servidores ASGI (Uvicorn, Gunicorn, etc.), y una instancia global
`app` usada por defecto cuando se ejecuta directamente con Uvicorn.

Usage:
    uvicorn command_analyzer.main:app --reload
    python -m command_analyzer.main
"""

import logging

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import __version__
from .api.routes import router
from .config import settings

logger = logging.getLogger(__name__)


async def invalid_body_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Cuerpo JSON mal formado o sin el campo esperado → 400."""
    logger.debug("Petición inválida en %s: %s", request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Cuerpo de la petición inválido"},
    )


def create_app() -> FastAPI:
    """
    Crea y configura la aplicación FastAPI.

    - Asigna nombre y versión de la api.
    - Configura CORS permisivo para el frontend.
    - Responde 400 ante cuerpos inválidos.
    - Registra las rutas de análisis y de salud.

    Returns:
        Instancia configurada de `FastAPI`.
    """
    app = FastAPI(
        title="Analyzer Service",
        description="Análisis léxico, sintáctico y semántico de comandos git y fragmentos de código.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # --- CORS Configuration ---
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["POST", "GET", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    app.add_exception_handler(RequestValidationError, invalid_body_handler)

    app.include_router(router)

    logger.info(f"{settings.APP_NAME} iniciado ({settings.ENV}) - Puerto: {settings.PORT}")
    logger.info("Endpoints: POST /analyze, POST /analyze-code, GET /health")

    return app


# Instancia por defecto utilizada por Uvicorn
app = create_app()

if __name__ == "__main__":
    uvicorn.run(
        app,
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL,
    )
