from typing import Optional
from datetime import date
import sqlalchemy as sa
from sqlmodel import Field, SQLModel
from profile_hub.models.base import ProfileRecordModel
from profile_hub.models.enums import PortfolioType, enum_column


class PortfolioItem(ProfileRecordModel, SQLModel, table=True):
    __tablename__ = 'portfolio_items'

    title: str
    description: str = Field(sa_column=sa.Column(sa.Text(), nullable=False))
    type: PortfolioType = Field(
        default=PortfolioType.PROJECT,
        sa_column=enum_column(PortfolioType, 'portfolio_type'),
    )
    # JSON-encoded lists of strings
    technologies: Optional[str] = None
    images: Optional[str] = None
    url: Optional[str] = None
    github_url: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    is_ongoing: bool = False
