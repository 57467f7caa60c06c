from sqlmodel import SQLModel
from profile_hub.db.session import engine
from profile_hub.core.config import settings
from profile_hub.models import (  # noqa: F401
    user,
    refresh_token,
    skill,
    endorsement,
    achievement,
    experience,
    education,
    portfolio,
)


def init_db(drop_all: bool = False) -> None:
    if drop_all:
        SQLModel.metadata.drop_all(engine)
    if (
        settings.DATABASE_URL.startswith('sqlite')
        or settings.ENV != 'production'
        or settings.AUTO_CREATE_TABLES
    ):
        SQLModel.metadata.create_all(engine)
