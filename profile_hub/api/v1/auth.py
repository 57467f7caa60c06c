from fastapi import APIRouter, Depends, HTTPException, status
from loguru import logger
from sqlmodel import Session
from profile_hub.db.session import get_session
from profile_hub.models.user import User
from profile_hub.schemas.auth import (
    AuthResponse,
    LoginRequest,
    LogoutRequest,
    MeResponse,
    RefreshRequest,
    RegisterRequest,
    TokenResponse,
)
from profile_hub.services.auth_service import (
    authenticate_user,
    create_user,
    get_current_user,
    get_user_by_email,
    issue_tokens,
    revoke_refresh_token,
    validate_refresh_token,
)
from profile_hub.services.user_service import to_user_out

router = APIRouter(prefix='/auth', tags=['auth'])


@router.post('/register', response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(payload: RegisterRequest, session: Session = Depends(get_session)) -> AuthResponse:
    if get_user_by_email(session, payload.email):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail='User already exists with this email',
        )
    user = create_user(session, payload)
    token, refresh_token = issue_tokens(session, user.id)
    return AuthResponse(
        message='User registered successfully',
        token=token,
        refresh_token=refresh_token,
        user=to_user_out(user),
    )


@router.post('/login', response_model=AuthResponse)
def login(payload: LoginRequest, session: Session = Depends(get_session)) -> AuthResponse:
    user = authenticate_user(session, payload.email, payload.password)
    if not user:
        logger.warning('auth.login.rejected')
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail='Invalid credentials')
    token, refresh_token = issue_tokens(session, user.id)
    logger.info('auth.login.accepted', user_id=user.id)
    return AuthResponse(
        message='Login successful',
        token=token,
        refresh_token=refresh_token,
        user=to_user_out(user),
    )


@router.get('/me', response_model=MeResponse)
def me(user: User = Depends(get_current_user)) -> MeResponse:
    return MeResponse(user=to_user_out(user))


@router.post('/refresh', response_model=TokenResponse)
def refresh(payload: RefreshRequest, session: Session = Depends(get_session)) -> TokenResponse:
    user_id = validate_refresh_token(session, payload.refresh_token)
    revoke_refresh_token(session, payload.refresh_token)
    token, refresh_token = issue_tokens(session, user_id)
    return TokenResponse(message='Token refreshed successfully', token=token, refresh_token=refresh_token)


@router.post('/logout')
def logout(payload: LogoutRequest, session: Session = Depends(get_session)) -> dict:
    revoke_refresh_token(session, payload.refresh_token)
    return {'status': 'ok'}
