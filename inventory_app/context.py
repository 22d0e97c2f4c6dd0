from dataclasses import dataclass
import logging

from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from inventory_app.config import Settings
from inventory_app.database import Base, make_engine, make_session_factory
from inventory_app.models.product import Product  # noqa: F401  registers the products table
from inventory_app.services.captcha import RecaptchaVerifier
from inventory_app.utils.message_log import MessageLog

logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    """
    Process-wide resources shared by all request handlers.

    Built once when the application starts and closed when it stops. The
    engine's connection pool is the only shared mutable state.
    """
    settings: Settings
    engine: Engine
    session_factory: sessionmaker
    verifier: RecaptchaVerifier
    message_log: MessageLog

    @classmethod
    def from_settings(cls, settings: Settings) -> "AppContext":
        engine = make_engine(settings.DATABASE_URL)
        return cls(
            settings=settings,
            engine=engine,
            session_factory=make_session_factory(engine),
            verifier=RecaptchaVerifier(
                secret=settings.RECAPTCHA_SECRET,
                verify_url=settings.RECAPTCHA_VERIFY_URL,
            ),
            message_log=MessageLog(settings.CONTACT_LOG_PATH),
        )

    def create_tables(self) -> None:
        logger.info("Creating database tables...")
        Base.metadata.create_all(bind=self.engine)
        logger.info("Database tables created successfully")

    def close(self) -> None:
        """Release every pooled database connection."""
        self.engine.dispose()
