"""Process-wide application context."""

from dataclasses import dataclass

from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from catalog.config import Settings
from catalog.database import create_db_engine, create_session_factory


@dataclass
class AppContext:
    """Settings and store handles shared by every request.

    Built once by ``create_app`` and stored on ``app.state.context``.
    """

    settings: Settings
    engine: Engine
    session_factory: sessionmaker

    @classmethod
    def from_settings(cls, settings: Settings) -> "AppContext":
        engine = create_db_engine(settings.database_url)
        return cls(
            settings=settings,
            engine=engine,
            session_factory=create_session_factory(engine),
        )

    def dispose(self) -> None:
        """Release pooled database connections."""
        self.engine.dispose()
