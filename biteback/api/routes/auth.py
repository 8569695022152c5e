"""Authentication routes"""

from fastapi import APIRouter, Depends, Request, status

from ...api.dependencies import (
    forgot_password_rate_limit,
    get_bearer_token,
    get_current_user,
    get_email_service,
    get_otp_service,
    get_session_cache,
    get_unit_of_work,
    login_rate_limit,
    resend_otp_rate_limit,
)
from ...api.responses import ok
from ...application.dtos.auth_dtos import (
    AuthResponse,
    ForgotPasswordDto,
    ForgotPasswordResponse,
    LoginDto,
    OtpSentResponse,
    RefreshTokenDto,
    ResendOtpDto,
    ResetPasswordDto,
    SignupDto,
    TokenDto,
    VerifyPhoneDto,
)
from ...application.dtos.common import ApiResponse, MessageResponse
from ...application.services.otp_service import OtpService
from ...application.use_cases.forgot_password_use_case import ForgotPasswordUseCase
from ...application.use_cases.login_user import LoginUserUseCase
from ...application.use_cases.logout_user import LogoutUserUseCase
from ...application.use_cases.refresh_token_use_case import RefreshTokenUseCase
from ...application.use_cases.register_user import RegisterUserUseCase
from ...application.use_cases.resend_otp import ResendOtpUseCase
from ...application.use_cases.reset_password_use_case import ResetPasswordUseCase
from ...application.use_cases.verify_phone import VerifyPhoneUseCase
from ...domain.authorization import CurrentUser
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...infrastructure.cache.session_cache import SessionCache
from ...infrastructure.external_services.email_service import EmailService

router = APIRouter()


@router.post("/signup", response_model=ApiResponse[AuthResponse], status_code=status.HTTP_201_CREATED)
async def signup(
    payload: SignupDto,
    request: Request,
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
    otp_service: OtpService = Depends(get_otp_service),
):
    """Register a new user and text them a verification code"""
    use_case = RegisterUserUseCase(unit_of_work, otp_service)
    return ok(request, await use_case.execute(payload))


@router.post("/login", response_model=ApiResponse[AuthResponse], dependencies=[Depends(login_rate_limit)])
async def login(
    payload: LoginDto,
    request: Request,
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    """Login with email or phone"""
    use_case = LoginUserUseCase(unit_of_work)
    return ok(request, await use_case.execute(payload))


@router.post("/verify-phone", response_model=ApiResponse[MessageResponse])
async def verify_phone(
    payload: VerifyPhoneDto,
    request: Request,
    current_user: CurrentUser = Depends(get_current_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
    session_cache: SessionCache = Depends(get_session_cache),
):
    use_case = VerifyPhoneUseCase(unit_of_work, session_cache)
    return ok(request, await use_case.execute(current_user.id, payload))


@router.post("/resend-otp", response_model=ApiResponse[OtpSentResponse], dependencies=[Depends(resend_otp_rate_limit)])
async def resend_otp(
    payload: ResendOtpDto,
    request: Request,
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
    session_cache: SessionCache = Depends(get_session_cache),
    otp_service: OtpService = Depends(get_otp_service),
):
    use_case = ResendOtpUseCase(unit_of_work, session_cache, otp_service)
    return ok(request, await use_case.execute(payload))


@router.post(
    "/forgot-password",
    response_model=ApiResponse[ForgotPasswordResponse],
    dependencies=[Depends(forgot_password_rate_limit)],
)
async def forgot_password(
    payload: ForgotPasswordDto,
    request: Request,
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
    email_service: EmailService = Depends(get_email_service),
):
    """Handle forgot password request"""
    use_case = ForgotPasswordUseCase(unit_of_work, email_service)
    return ok(request, await use_case.execute(payload))


@router.post("/reset-password", response_model=ApiResponse[MessageResponse])
async def reset_password(
    payload: ResetPasswordDto,
    request: Request,
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    """Reset password with token"""
    use_case = ResetPasswordUseCase(unit_of_work)
    return ok(request, await use_case.execute(payload))


@router.post("/refresh", response_model=ApiResponse[TokenDto])
async def refresh_token(
    payload: RefreshTokenDto,
    request: Request,
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    """Rotate a refresh token into a new token pair"""
    use_case = RefreshTokenUseCase(unit_of_work)
    return ok(request, await use_case.execute(payload))


@router.post("/logout", response_model=ApiResponse[MessageResponse])
async def logout(
    request: Request,
    current_user: CurrentUser = Depends(get_current_user),
    token: str = Depends(get_bearer_token),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
    session_cache: SessionCache = Depends(get_session_cache),
):
    use_case = LogoutUserUseCase(unit_of_work, session_cache)
    return ok(request, await use_case.execute(current_user.id, token))
