import json
from typing import Optional, TypeVar
from loguru import logger
from sqlalchemy import func
from sqlmodel import Session, select
from profile_hub.models.achievement import Achievement
from profile_hub.models.base import ProfileRecordModel
from profile_hub.models.education import Education
from profile_hub.models.endorsement import SkillEndorsement
from profile_hub.models.experience import Experience
from profile_hub.models.portfolio import PortfolioItem
from profile_hub.models.skill import Skill
from profile_hub.schemas.profile import (
    AchievementCreate,
    EducationCreate,
    ExperienceCreate,
    PortfolioCreate,
    SkillCreate,
)

RecordT = TypeVar('RecordT', bound=ProfileRecordModel)

# list-valued fields stored as JSON text
_LIST_FIELDS = {
    Education: ('achievements',),
    PortfolioItem: ('technologies', 'images'),
}


class AlreadyEndorsedError(ValueError):
    pass


def serialize_list(values: Optional[list[str]]) -> Optional[str]:
    if not values:
        return None
    return json.dumps([str(item).strip() for item in values])


def deserialize_list(raw: Optional[str]) -> list[str]:
    if not raw:
        return []
    try:
        value = json.loads(raw)
    except json.JSONDecodeError:
        return [item.strip() for item in raw.split(',') if item.strip()]
    if isinstance(value, list):
        return [str(item) for item in value]
    return []


def _record_values(model: type[RecordT], payload) -> dict:
    data = payload.model_dump()
    for name in _LIST_FIELDS.get(model, ()):
        data[name] = serialize_list(data.get(name))
    return data


def _next_position(session: Session, model: type[RecordT], user_id: str) -> int:
    current = session.exec(select(func.max(model.position)).where(model.user_id == user_id)).one()
    return 0 if current is None else current + 1


def list_records(session: Session, model: type[RecordT], user_id: str) -> list[RecordT]:
    statement = select(model).where(model.user_id == user_id).order_by(model.position.asc())
    return list(session.exec(statement).all())


def get_record(session: Session, model: type[RecordT], user_id: str, record_id: str) -> Optional[RecordT]:
    statement = select(model).where((model.id == record_id) & (model.user_id == user_id))
    return session.exec(statement).first()


def add_record(session: Session, model: type[RecordT], user_id: str, payload) -> RecordT:
    record = model(
        user_id=user_id,
        position=_next_position(session, model, user_id),
        **_record_values(model, payload),
    )
    session.add(record)
    session.commit()
    session.refresh(record)
    logger.info('profile.record.added', table=model.__tablename__, user_id=user_id, record_id=record.id)
    return record


def replace_record(session: Session, record: RecordT, payload) -> RecordT:
    for key, value in _record_values(type(record), payload).items():
        setattr(record, key, value)
    session.add(record)
    session.commit()
    session.refresh(record)
    logger.info('profile.record.replaced', table=record.__tablename__, record_id=record.id)
    return record


def delete_record(session: Session, record: ProfileRecordModel) -> None:
    record_id, table = record.id, record.__tablename__
    if isinstance(record, Skill):
        for endorsement in session.exec(
            select(SkillEndorsement).where(SkillEndorsement.skill_id == record.id)
        ).all():
            session.delete(endorsement)
    session.delete(record)
    session.commit()
    logger.info('profile.record.deleted', table=table, record_id=record_id)


def add_skill(session: Session, user_id: str, payload: SkillCreate) -> Skill:
    return add_record(session, Skill, user_id, payload)


def add_achievement(session: Session, user_id: str, payload: AchievementCreate) -> Achievement:
    return add_record(session, Achievement, user_id, payload)


def add_experience(session: Session, user_id: str, payload: ExperienceCreate) -> Experience:
    return add_record(session, Experience, user_id, payload)


def add_education(session: Session, user_id: str, payload: EducationCreate) -> Education:
    return add_record(session, Education, user_id, payload)


def add_portfolio_item(session: Session, user_id: str, payload: PortfolioCreate) -> PortfolioItem:
    return add_record(session, PortfolioItem, user_id, payload)


def endorsements_by_skill(session: Session, skill_ids: list[str]) -> dict[str, list[SkillEndorsement]]:
    grouped: dict[str, list[SkillEndorsement]] = {skill_id: [] for skill_id in skill_ids}
    if not skill_ids:
        return grouped
    statement = (
        select(SkillEndorsement)
        .where(SkillEndorsement.skill_id.in_(skill_ids))
        .order_by(SkillEndorsement.created_at.asc())
    )
    for endorsement in session.exec(statement).all():
        grouped[endorsement.skill_id].append(endorsement)
    return grouped


def endorse_skill(
    session: Session,
    skill: Skill,
    endorser_id: str,
    note: Optional[str] = None,
) -> SkillEndorsement:
    existing = session.exec(
        select(SkillEndorsement).where(
            (SkillEndorsement.skill_id == skill.id) & (SkillEndorsement.endorser_id == endorser_id)
        )
    ).first()
    if existing:
        raise AlreadyEndorsedError('Already endorsed this skill')
    endorsement = SkillEndorsement(
        skill_id=skill.id,
        endorser_id=endorser_id,
        note=note.strip() if note else note,
    )
    session.add(endorsement)
    session.commit()
    session.refresh(endorsement)
    logger.info('profile.skill.endorsed', skill_id=skill.id, endorser_id=endorser_id)
    return endorsement


def remove_endorsement(session: Session, skill: Skill, endorser_id: str) -> bool:
    endorsement = session.exec(
        select(SkillEndorsement).where(
            (SkillEndorsement.skill_id == skill.id) & (SkillEndorsement.endorser_id == endorser_id)
        )
    ).first()
    if not endorsement:
        return False
    session.delete(endorsement)
    session.commit()
    logger.info('profile.skill.endorsement_removed', skill_id=skill.id, endorser_id=endorser_id)
    return True


def add_portfolio_image(session: Session, item: PortfolioItem, url: str) -> PortfolioItem:
    item.images = serialize_list([*deserialize_list(item.images), url])
    session.add(item)
    session.commit()
    session.refresh(item)
    logger.info('profile.portfolio.image_added', record_id=item.id)
    return item
