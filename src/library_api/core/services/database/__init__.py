from .db_manage import DbManageService
from .db_session import DbSessionService

__all__ = ["DbManageService", "DbSessionService"]
