import os
from typing import Iterator
from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker, DeclarativeBase, Session


class Base(DeclarativeBase):
  pass


class Database:
  """Engine plus session factory for one database URL."""

  def __init__(self, url: str):
    parsed = make_url(url)
    connect_args = {}
    if parsed.get_backend_name() == "sqlite":
      connect_args["check_same_thread"] = False
      if parsed.database and parsed.database != ":memory:":
        db_dir = os.path.dirname(os.path.abspath(parsed.database))
        os.makedirs(db_dir, exist_ok=True)

    self.url = url
    self.engine = create_engine(url, connect_args=connect_args)
    self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

  def create_all(self) -> None:
    # Register every mapped class on Base.metadata before creating tables
    from easyhr import models  # noqa: F401
    Base.metadata.create_all(bind=self.engine)

  def session(self) -> Session:
    return self.SessionLocal()

  def dispose(self) -> None:
    self.engine.dispose()


def get_db(request: Request) -> Iterator[Session]:
  db = request.app.state.db.session()
  try:
    yield db
  finally:
    db.close()
