from typing import Any, Mapping, Optional

from .config import Settings, get_settings


class Application:
    """Aplicación que aloja la sesión. Expone su configuración vía get()."""

    def __init__(self, config: Optional[Mapping[str, Any]] = None):
        self._config = dict(config or {})

    def get(self, key: str, default: Any = None) -> Any:
        return self._config.get(key, default)


class MultiClientApplication(Application):
    """
    Aplicación con varios clientes (por ejemplo sitio público y panel de administración)
    que pueden compartir el mismo almacenamiento de sesiones.
    """

    def __init__(self, client_id: int, config: Optional[Mapping[str, Any]] = None):
        super().__init__(config)
        self.client_id = client_id

    def get_client_id(self) -> int:
        return self.client_id


def get_application(settings: Optional[Settings] = None) -> Application:
    """
    Construye la aplicación a partir de la configuración.
    Si APP_CLIENT_ID está definido la aplicación es multi-cliente.
    """
    settings = settings or get_settings()
    config = {"shared_session": settings.shared_session}

    client_id = settings.client_id
    if client_id is None:
        return Application(config)
    return MultiClientApplication(client_id, config)
