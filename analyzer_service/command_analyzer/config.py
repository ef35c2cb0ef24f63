"""
Módulo de configuración del servicio de análisis.

Utiliza `pydantic-settings` para cargar la configuración desde variables
de entorno y/o archivos `.env`. Todos los atributos definidos en `Settings`
pueden sobreescribirse mediante variables de entorno con el mismo nombre.

Ejemplo de `.env`:
    APP_NAME=analyzer_service
    ENV=prod
    PORT=8080
    LOG_LEVEL=info
    CORS_ORIGINS=http://localhost:5173
    REQUIRE_SEMICOLONS=true
"""

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Configuración central del servicio.

    Atributos principales:
        APP_NAME:
            Nombre de la aplicación (aparece en la documentación de FastAPI).
        ENV:
            Entorno de ejecución: "dev", "prod", "test", etc.
        HOST / PORT:
            Dirección en la que escucha Uvicorn.
        LOG_LEVEL:
            Nivel de log de Uvicorn y del paquete.
        CORS_ORIGINS:
            Orígenes permitidos separados por coma ("*" para cualquiera).
        REQUIRE_SEMICOLONS:
            Activa la regla de terminador de sentencia del analizador de
            fragmentos (desactivada por defecto).
    """

    APP_NAME: str = "analyzer_service"
    ENV: str = "dev"

    HOST: str = "0.0.0.0"
    PORT: int = 8080
    LOG_LEVEL: str = "info"

    CORS_ORIGINS: str = "*"

    REQUIRE_SEMICOLONS: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="",
        extra="ignore",
    )

    @property
    def cors_origins(self) -> List[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


# Instancia única de configuración usada en el resto de la app
settings = Settings()
