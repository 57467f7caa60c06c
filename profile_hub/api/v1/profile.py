from typing import Optional
from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status
from sqlmodel import Session, select
from profile_hub.db.session import get_session
from profile_hub.models.achievement import Achievement
from profile_hub.models.education import Education
from profile_hub.models.endorsement import SkillEndorsement
from profile_hub.models.experience import Experience
from profile_hub.models.portfolio import PortfolioItem
from profile_hub.models.skill import Skill
from profile_hub.models.user import User
from profile_hub.schemas.profile import (
    AchievementCreate,
    AchievementList,
    AchievementOut,
    AvailabilityOut,
    EducationCreate,
    EducationList,
    EducationOut,
    EndorsementOut,
    EndorseRequest,
    ExperienceCreate,
    ExperienceList,
    ExperienceOut,
    PortfolioCreate,
    PortfolioList,
    PortfolioOut,
    PreferencesOut,
    ProfileOut,
    ProfileResponse,
    SkillCreate,
    SkillList,
    SkillOut,
    UserResponse,
)
from profile_hub.schemas.user import (
    AvailabilityUpdate,
    CoverPictureOut,
    PreferencesUpdate,
    ProfilePictureOut,
    UserUpdate,
)
from profile_hub.services.auth_service import get_current_user
from profile_hub.services.media_service import store_image
from profile_hub.services.permissions import viewer_for
from profile_hub.services.profile_service import (
    AlreadyEndorsedError,
    add_achievement,
    add_education,
    add_experience,
    add_portfolio_image,
    add_portfolio_item,
    add_skill,
    delete_record,
    deserialize_list,
    endorse_skill,
    endorsements_by_skill,
    get_record,
    list_records,
    remove_endorsement,
    replace_record,
)
from profile_hub.services.user_service import (
    availability_of,
    preferences_of,
    set_picture,
    to_user_out,
    update_availability,
    update_preferences,
    update_user,
)

router = APIRouter(prefix='/user', tags=['profile'])


def _to_endorsement_out(record: SkillEndorsement) -> EndorsementOut:
    return EndorsementOut(
        id=record.id,
        endorser=record.endorser_id,
        note=record.note,
        created_at=record.created_at,
        updated_at=record.updated_at,
    )


def _to_skill_out(skill: Skill, endorsements: list[SkillEndorsement]) -> SkillOut:
    return SkillOut(
        id=skill.id,
        name=skill.name,
        level=skill.level,
        category=skill.category,
        endorsements=[_to_endorsement_out(item) for item in endorsements],
        endorsement_count=len(endorsements),
        created_at=skill.created_at,
        updated_at=skill.updated_at,
    )


def _to_achievement_out(record: Achievement) -> AchievementOut:
    return AchievementOut(
        id=record.id,
        title=record.title,
        description=record.description,
        date=record.date,
        type=record.type,
        url=record.url,
        created_at=record.created_at,
        updated_at=record.updated_at,
    )


def _to_experience_out(record: Experience) -> ExperienceOut:
    return ExperienceOut(
        id=record.id,
        title=record.title,
        company=record.company,
        location=record.location,
        description=record.description,
        start_date=record.start_date,
        end_date=record.end_date,
        is_current_position=record.is_current_position,
        type=record.type,
        created_at=record.created_at,
        updated_at=record.updated_at,
    )


def _to_education_out(record: Education) -> EducationOut:
    return EducationOut(
        id=record.id,
        institution=record.institution,
        degree=record.degree,
        field=record.field,
        start_year=record.start_year,
        end_year=record.end_year,
        is_currently_studying=record.is_currently_studying,
        achievements=deserialize_list(record.achievements),
        created_at=record.created_at,
        updated_at=record.updated_at,
    )


def _to_portfolio_out(record: PortfolioItem) -> PortfolioOut:
    return PortfolioOut(
        id=record.id,
        title=record.title,
        description=record.description,
        type=record.type,
        technologies=deserialize_list(record.technologies),
        url=record.url,
        github_url=record.github_url,
        images=deserialize_list(record.images),
        start_date=record.start_date,
        end_date=record.end_date,
        is_ongoing=record.is_ongoing,
        created_at=record.created_at,
        updated_at=record.updated_at,
    )


def _skills(session: Session, user_id: str) -> list[SkillOut]:
    skills = list_records(session, Skill, user_id)
    grouped = endorsements_by_skill(session, [skill.id for skill in skills])
    return [_to_skill_out(skill, grouped[skill.id]) for skill in skills]


def _achievements(session: Session, user_id: str) -> list[AchievementOut]:
    return [_to_achievement_out(item) for item in list_records(session, Achievement, user_id)]


def _experience(session: Session, user_id: str) -> list[ExperienceOut]:
    return [_to_experience_out(item) for item in list_records(session, Experience, user_id)]


def _education(session: Session, user_id: str) -> list[EducationOut]:
    return [_to_education_out(item) for item in list_records(session, Education, user_id)]


def _portfolio(session: Session, user_id: str) -> list[PortfolioOut]:
    return [_to_portfolio_out(item) for item in list_records(session, PortfolioItem, user_id)]


def _to_profile_out(session: Session, user: User, show_email: bool) -> ProfileOut:
    return ProfileOut(
        **to_user_out(user, show_email=show_email).model_dump(),
        availability=availability_of(user),
        preferences=preferences_of(user),
        skills=_skills(session, user.id),
        achievements=_achievements(session, user.id),
        experience=_experience(session, user.id),
        education=_education(session, user.id),
        portfolio=_portfolio(session, user.id),
    )


def _get_owned(session: Session, model, user_id: str, record_id: str, label: str):
    record = get_record(session, model, user_id, record_id)
    if not record:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f'{label} not found')
    return record


@router.get('/profile', response_model=ProfileResponse)
def get_own_profile(
    session: Session = Depends(get_session),
    user: User = Depends(get_current_user),
) -> ProfileResponse:
    return ProfileResponse(user=_to_profile_out(session, user, show_email=True))


@router.put('/profile', response_model=UserResponse)
def update_own_profile(
    payload: UserUpdate,
    session: Session = Depends(get_session),
    user: User = Depends(get_current_user),
) -> UserResponse:
    record = update_user(session, user, payload)
    return UserResponse(user=to_user_out(record))


@router.get('/{user_id}/profile', response_model=ProfileResponse)
def get_profile(
    user_id: str,
    session: Session = Depends(get_session),
    user: User = Depends(get_current_user),
) -> ProfileResponse:
    owner = session.exec(select(User).where(User.id == user_id)).first()
    if not owner or not owner.is_active:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail='Profile not found')
    viewer = viewer_for(user.id, owner.id)
    show_email = viewer.is_owner or owner.show_email
    return ProfileResponse(user=_to_profile_out(session, owner, show_email=show_email))


@router.post('/skills', response_model=SkillList)
def add_skill_endpoint(
    payload: SkillCreate,
    session: Session = Depends(get_session),
    user: User = Depends(get_current_user),
) -> SkillList:
    add_skill(session, user.id, payload)
    return SkillList(skills=_skills(session, user.id))


@router.delete('/skills/{skill_id}', response_model=SkillList)
def delete_skill_endpoint(
    skill_id: str,
    session: Session = Depends(get_session),
    user: User = Depends(get_current_user),
) -> SkillList:
    delete_record(session, _get_owned(session, Skill, user.id, skill_id, 'Skill'))
    return SkillList(skills=_skills(session, user.id))


@router.post('/{user_id}/skills/{skill_id}/endorse', response_model=SkillList)
def endorse_skill_endpoint(
    user_id: str,
    skill_id: str,
    payload: EndorseRequest,
    session: Session = Depends(get_session),
    user: User = Depends(get_current_user),
) -> SkillList:
    owner = session.exec(select(User).where(User.id == user_id)).first()
    if not owner:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail='User not found')
    skill = _get_owned(session, Skill, owner.id, skill_id, 'Skill')
    try:
        endorse_skill(session, skill, user.id, payload.note)
    except AlreadyEndorsedError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return SkillList(skills=_skills(session, owner.id))


@router.post('/achievements', response_model=AchievementList)
def add_achievement_endpoint(
    payload: AchievementCreate,
    session: Session = Depends(get_session),
    user: User = Depends(get_current_user),
) -> AchievementList:
    add_achievement(session, user.id, payload)
    return AchievementList(achievements=_achievements(session, user.id))


@router.delete('/achievements/{achievement_id}', response_model=AchievementList)
def delete_achievement_endpoint(
    achievement_id: str,
    session: Session = Depends(get_session),
    user: User = Depends(get_current_user),
) -> AchievementList:
    delete_record(session, _get_owned(session, Achievement, user.id, achievement_id, 'Achievement'))
    return AchievementList(achievements=_achievements(session, user.id))


@router.post('/experience', response_model=ExperienceList)
def add_experience_endpoint(
    payload: ExperienceCreate,
    session: Session = Depends(get_session),
    user: User = Depends(get_current_user),
) -> ExperienceList:
    add_experience(session, user.id, payload)
    return ExperienceList(experience=_experience(session, user.id))


@router.put('/experience/{exp_id}', response_model=ExperienceList)
def update_experience_endpoint(
    exp_id: str,
    payload: ExperienceCreate,
    session: Session = Depends(get_session),
    user: User = Depends(get_current_user),
) -> ExperienceList:
    replace_record(session, _get_owned(session, Experience, user.id, exp_id, 'Experience'), payload)
    return ExperienceList(experience=_experience(session, user.id))


@router.delete('/experience/{exp_id}', response_model=ExperienceList)
def delete_experience_endpoint(
    exp_id: str,
    session: Session = Depends(get_session),
    user: User = Depends(get_current_user),
) -> ExperienceList:
    delete_record(session, _get_owned(session, Experience, user.id, exp_id, 'Experience'))
    return ExperienceList(experience=_experience(session, user.id))


@router.post('/education', response_model=EducationList)
def add_education_endpoint(
    payload: EducationCreate,
    session: Session = Depends(get_session),
    user: User = Depends(get_current_user),
) -> EducationList:
    add_education(session, user.id, payload)
    return EducationList(education=_education(session, user.id))


@router.put('/education/{edu_id}', response_model=EducationList)
def update_education_endpoint(
    edu_id: str,
    payload: EducationCreate,
    session: Session = Depends(get_session),
    user: User = Depends(get_current_user),
) -> EducationList:
    replace_record(session, _get_owned(session, Education, user.id, edu_id, 'Education'), payload)
    return EducationList(education=_education(session, user.id))


@router.delete('/education/{edu_id}', response_model=EducationList)
def delete_education_endpoint(
    edu_id: str,
    session: Session = Depends(get_session),
    user: User = Depends(get_current_user),
) -> EducationList:
    delete_record(session, _get_owned(session, Education, user.id, edu_id, 'Education'))
    return EducationList(education=_education(session, user.id))


@router.post('/portfolio', response_model=PortfolioList)
def add_portfolio_endpoint(
    payload: PortfolioCreate,
    session: Session = Depends(get_session),
    user: User = Depends(get_current_user),
) -> PortfolioList:
    add_portfolio_item(session, user.id, payload)
    return PortfolioList(portfolio=_portfolio(session, user.id))


@router.put('/portfolio/{item_id}', response_model=PortfolioList)
def update_portfolio_endpoint(
    item_id: str,
    payload: PortfolioCreate,
    session: Session = Depends(get_session),
    user: User = Depends(get_current_user),
) -> PortfolioList:
    replace_record(session, _get_owned(session, PortfolioItem, user.id, item_id, 'Portfolio item'), payload)
    return PortfolioList(portfolio=_portfolio(session, user.id))


@router.delete('/portfolio/{item_id}', response_model=PortfolioList)
def delete_portfolio_endpoint(
    item_id: str,
    session: Session = Depends(get_session),
    user: User = Depends(get_current_user),
) -> PortfolioList:
    delete_record(session, _get_owned(session, PortfolioItem, user.id, item_id, 'Portfolio item'))
    return PortfolioList(portfolio=_portfolio(session, user.id))


@router.patch('/availability', response_model=AvailabilityOut)
def update_availability_endpoint(
    payload: AvailabilityUpdate,
    session: Session = Depends(get_session),
    user: User = Depends(get_current_user),
) -> AvailabilityOut:
    record = update_availability(session, user, payload)
    return AvailabilityOut(availability=availability_of(record))


@router.patch('/privacy', response_model=PreferencesOut)
def update_privacy_endpoint(
    payload: PreferencesUpdate,
    session: Session = Depends(get_session),
    user: User = Depends(get_current_user),
) -> PreferencesOut:
    record = update_preferences(session, user, payload)
    return PreferencesOut(preferences=preferences_of(record))


@router.delete('/{user_id}/skills/{skill_id}/endorse', response_model=SkillList)
def remove_endorsement_endpoint(
    user_id: str,
    skill_id: str,
    session: Session = Depends(get_session),
    user: User = Depends(get_current_user),
) -> SkillList:
    owner = session.exec(select(User).where(User.id == user_id)).first()
    if not owner:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail='User not found')
    skill = _get_owned(session, Skill, owner.id, skill_id, 'Skill')
    if not remove_endorsement(session, skill, user.id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail='Endorsement not found')
    return SkillList(skills=_skills(session, owner.id))


async def _read_upload(image: Optional[UploadFile]) -> bytes:
    if image is None or not image.filename:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail='No file uploaded')
    return await image.read()


@router.post('/portfolio/{item_id}/images', response_model=PortfolioList)
async def upload_portfolio_image_endpoint(
    item_id: str,
    image: Optional[UploadFile] = File(default=None),
    session: Session = Depends(get_session),
    user: User = Depends(get_current_user),
) -> PortfolioList:
    item = _get_owned(session, PortfolioItem, user.id, item_id, 'Portfolio item')
    content = await _read_upload(image)
    add_portfolio_image(session, item, store_image('portfolio', image, content))
    return PortfolioList(portfolio=_portfolio(session, user.id))


@router.post('/profile-picture', response_model=ProfilePictureOut)
async def upload_profile_picture_endpoint(
    image: Optional[UploadFile] = File(default=None),
    session: Session = Depends(get_session),
    user: User = Depends(get_current_user),
) -> ProfilePictureOut:
    content = await _read_upload(image)
    record = set_picture(session, user, 'profile_picture', store_image('profile', image, content))
    return ProfilePictureOut(profile_picture=record.profile_picture)


@router.post('/cover-picture', response_model=CoverPictureOut)
async def upload_cover_picture_endpoint(
    image: Optional[UploadFile] = File(default=None),
    session: Session = Depends(get_session),
    user: User = Depends(get_current_user),
) -> CoverPictureOut:
    content = await _read_upload(image)
    record = set_picture(session, user, 'cover_picture', store_image('cover', image, content))
    return CoverPictureOut(cover_picture=record.cover_picture)
