import os
from typing import Optional

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in _TRUTHY


class Settings:
    """Configuración del módulo de metadatos de sesión, leída dinámicamente desde el entorno."""

    @property
    def database_url(self) -> str:
        return os.getenv("DATABASE_URL", "").strip() or "sqlite:///./session_metadata.db"

    @property
    def shared_session(self) -> bool:
        # Si la sesión se comparte entre clientes, no se guarda client_id
        return _env_flag("SHARED_SESSION", False)

    @property
    def client_id(self) -> Optional[int]:
        raw = os.getenv("APP_CLIENT_ID", "").strip()
        if not raw:
            return None
        try:
            return int(raw)
        except ValueError:
            raise ValueError(f"APP_CLIENT_ID debe ser un entero, recibido: {raw!r}")

    @property
    def sql_echo(self) -> bool:
        return _env_flag("SQL_ECHO", False)


# Instancia singleton de Settings (sin cache, lee valores dinámicamente)
_settings_instance = None


def get_settings() -> Settings:
    """Retorna la instancia de Settings. Lee variables de entorno dinámicamente."""
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance


def clear_settings_cache():
    """Limpia la instancia de settings (útil en tests tras cambiar el entorno)."""
    global _settings_instance
    _settings_instance = None
