"""Esquemas de entrada/salida del servicio de análisis.

Define los modelos de petición y respuesta para los endpoints:
- `/analyze`: validación de un comando git
- `/analyze-code`: análisis de un fragmento de código
- `/health`: estado del servicio

Los modelos de resultado viven en `domain.results`; aquí se reexportan
para que la capa HTTP tenga un único punto de importación.
"""

from pydantic import BaseModel

from .domain.results import AnalysisResult, CodeAnalysisResult


# MODELOS DE PETICIÓN

class CommandReq(BaseModel):
    """
    Modelo de solicitud para el endpoint `/analyze`.

    Atributos:
        command (str): línea de comandos a validar (vacía si falta).
    """
    command: str = ""


class CodeReq(BaseModel):
    """
    Modelo de solicitud para el endpoint `/analyze-code`.

    Atributos:
        code (str): fragmento de código a analizar.
    """
    code: str


# MODELOS DE RESPUESTA

class HealthResp(BaseModel):
    """Respuesta del endpoint `/health`."""
    status: str
    service: str
    version: str


__all__ = [
    "CommandReq",
    "CodeReq",
    "HealthResp",
    "AnalysisResult",
    "CodeAnalysisResult",
]
