from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool

Base = declarative_base()


class Database:
    """Engine + session factory, opened at startup and disposed at shutdown."""

    def __init__(self, url: str):
        self.url = url
        self.engine = None
        self.SessionLocal = None

    def connect(self):
        kwargs = {"pool_pre_ping": True}
        if self.url.startswith("sqlite"):
            kwargs["connect_args"] = {"check_same_thread": False}
            # in-memory databases only live as long as their one connection
            if ":memory:" in self.url or self.url in ("sqlite://", "sqlite:///"):
                kwargs["poolclass"] = StaticPool

        self.engine = create_engine(self.url, **kwargs)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)
        return self

    def create_all(self):
        # models must be imported so their tables are registered on Base
        from banquet_booking.models import booking  # noqa: F401

        Base.metadata.create_all(bind=self.engine)

    def session(self):
        if self.SessionLocal is None:
            raise RuntimeError("Database is not connected")
        return self.SessionLocal()

    def dispose(self):
        if self.engine is not None:
            self.engine.dispose()
            self.engine = None
            self.SessionLocal = None
