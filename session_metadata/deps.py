from fastapi import Depends
from sqlalchemy.orm import Session

from .application import Application, get_application as build_application
from .database import get_db
from .services.metadata_manager import MetadataManager


def get_application() -> Application:
    """Dependencia con la aplicación configurada por variables de entorno."""
    return build_application()


def get_metadata_manager(
    db: Session = Depends(get_db),
    app: Application = Depends(get_application),
) -> MetadataManager:
    """
    Dependencia para inyectar el gestor de metadatos en los endpoints del host.
    Usa la misma sesión de DB que el resto del request.
    """
    return MetadataManager(app, db)
