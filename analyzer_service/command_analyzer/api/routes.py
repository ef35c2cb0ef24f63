"""Endpoints del servicio de análisis.

Responsabilidad única: manejar HTTP requests/responses. Los analizadores
nunca lanzan por entradas mal formadas: cualquier texto produce un
resultado estructurado.
"""

from fastapi import APIRouter

from .. import __version__
from ..config import settings
from ..schemas import AnalysisResult, CodeAnalysisResult, CodeReq, CommandReq, HealthResp
from ..services.code_analyzer import get_code_analyzer
from ..services.command_analyzer import get_command_analyzer


router = APIRouter(
    prefix="",
    responses={
        400: {"description": "Cuerpo de la petición inválido"},
        405: {"description": "Método no permitido"},
    },
)


@router.post(
    "/analyze",
    response_model=AnalysisResult,
    response_model_exclude_none=True,
    tags=["command-analysis"],
)
def analyze_command(req: CommandReq) -> AnalysisResult:
    """Valida una invocación de `git`.

    Args:
        req: Solicitud con el comando a validar

    Returns:
        AnalysisResult con un único veredicto y los tokens del comando
    """
    return get_command_analyzer().analyze(req.command)


@router.post(
    "/analyze-code",
    response_model=CodeAnalysisResult,
    response_model_exclude_none=True,
    tags=["code-analysis"],
)
def analyze_code(req: CodeReq) -> CodeAnalysisResult:
    """Analiza un fragmento de código.

    Args:
        req: Solicitud con el fragmento

    Returns:
        CodeAnalysisResult con tokens visibles, conteos y errores acumulados
    """
    return get_code_analyzer().analyze(req.code)


@router.get("/health", response_model=HealthResp, tags=["health"])
def health() -> HealthResp:
    """Endpoint de salud del servicio."""
    return HealthResp(status="ok", service=settings.APP_NAME, version=__version__)
