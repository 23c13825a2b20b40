# Importar todos los modelos para que create_all() los detecte
from .session import SessionMetadata

__all__ = [
    "SessionMetadata",
]
