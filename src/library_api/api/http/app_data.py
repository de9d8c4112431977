from dataclasses import dataclass

from src.library_api.core.services.database.db_session import DbSessionService
from src.library_api.core.services.patching import PatchEngine
from src.library_api.runtime.config.config_data import ConfigData


@dataclass
class ApplicationDependencies:
    config: ConfigData
    database_service: DbSessionService
    patch_engine: PatchEngine
