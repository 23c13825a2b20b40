from sqlalchemy import Column, Integer, String, Boolean

from ..database import Base


class SessionMetadata(Base):
    """
    Metadatos opcionales de una sesión web: quién es el dueño y cuándo empezó.
    Es una fila auxiliar y reconstruible, no el registro principal de la sesión.
    """
    __tablename__ = "session"

    session_id = Column(String(128), primary_key=True)
    guest = Column(Boolean, default=True)
    # Timestamp Unix del inicio de la sesión
    time = Column(Integer, default=0, index=True, nullable=False)
    userid = Column(Integer, default=0, index=True)
    username = Column(String(150), default="")
    # Solo se guarda cuando la sesión no se comparte entre clientes
    client_id = Column(Integer, nullable=True)
