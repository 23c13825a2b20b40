"""
Gestor de metadatos opcionales de sesión.

Mantiene una fila por sesión con el dueño (invitado, id y nombre de usuario) y el
momento de inicio. Los metadatos no son críticos: cualquier error de base de datos
se registra en el log y se ignora, nunca se propaga a quien llama.
"""
import logging
import time as _time
from typing import Any, Dict

from sqlalchemy import delete, insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..application import Application, MultiClientApplication
from ..models.session import SessionMetadata
from ..schemas.session_schema import SessionInfo, UserInfo

logger = logging.getLogger(__name__)


def _current_time() -> int:
    return int(_time.time())


class MetadataManager:
    """
    Fachada sobre la tabla de metadatos de sesión.

    Args:
        app: Aplicación que aloja la sesión (define client_id y shared_session)
        db: Sesión de SQLAlchemy del request o del barrido de limpieza
    """

    def __init__(self, app: Application, db: Session):
        self.app = app
        self.db = db

    def create_record_if_non_existing(self, session: SessionInfo, user: UserInfo) -> None:
        """
        Crea el registro de metadatos de la sesión si todavía no existe.
        Si la consulta o el insert fallan, la sesión sigue adelante sin metadatos.

        Cada sentencia corre dentro de un SAVEPOINT de la sesión de DB del llamador:
        un error deshace solo esa sentencia y el commit queda a cargo del llamador.
        """
        session_id = session.id

        try:
            with self.db.begin_nested():
                exists = (
                    self.db.query(SessionMetadata.session_id)
                    .filter(SessionMetadata.session_id == session_id)
                    .limit(1)
                    .scalar()
                )
        except SQLAlchemyError as e:
            # Puede que la tabla todavía no exista
            logger.warning(f"⚠️ No se pudo consultar metadatos de sesión {session_id[:8]}...: {e}")
            return

        if exists:
            return

        if session.is_new or session.timer_start is None:
            record_time = _current_time()
        else:
            record_time = session.timer_start

        values = self._build_values(session_id, record_time, user)

        try:
            with self.db.begin_nested():
                self.db.execute(insert(SessionMetadata).values(values))
            logger.debug(f"Metadatos de sesión creados: {session_id[:8]}...")
        except SQLAlchemyError as e:
            # Otro proceso pudo haber insertado la misma sesión; no se pisa su registro
            logger.warning(f"⚠️ No se pudieron guardar metadatos de sesión {session_id[:8]}...: {e}")

    def delete_prior_to(self, time: int) -> None:
        """
        Borra los registros cuyo inicio es anterior a `time` (timestamp Unix).
        La recolección de basura de sesiones no falla por esto, así que aquí tampoco.
        Igual que el alta, corre en un SAVEPOINT y no hace commit.
        """
        try:
            with self.db.begin_nested():
                result = self.db.execute(
                    delete(SessionMetadata).where(SessionMetadata.time < int(time))
                )
            logger.info(f"Metadatos de sesión anteriores a {time} eliminados: {result.rowcount}")
        except SQLAlchemyError as e:
            logger.warning(f"⚠️ Error al eliminar metadatos de sesión anteriores a {time}: {e}")

    def _build_values(self, session_id: str, record_time: int, user: UserInfo) -> Dict[str, Any]:
        values: Dict[str, Any] = {
            "session_id": session_id,
            "guest": bool(user.guest),
            "time": int(record_time),
            "userid": int(user.id),
            "username": user.username,
        }

        # client_id solo cuando la sesión no se comparte entre clientes
        if isinstance(self.app, MultiClientApplication) and not self.app.get("shared_session", False):
            values["client_id"] = int(self.app.get_client_id())

        return values
