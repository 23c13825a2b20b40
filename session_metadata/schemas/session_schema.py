from typing import Optional

from pydantic import BaseModel


class SessionInfo(BaseModel):
    """
    Vista mínima de la sesión que necesita el gestor de metadatos.
    - id: identificador opaco de la sesión
    - is_new: True si la sesión se acaba de crear en este request
    - timer_start: timestamp Unix de inicio registrado por el almacenamiento de sesión
    """
    id: str
    is_new: bool = False
    timer_start: Optional[int] = None


class UserInfo(BaseModel):
    id: int = 0
    username: str = ""
    guest: bool = True

    model_config = {"from_attributes": True}
