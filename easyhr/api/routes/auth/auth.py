from fastapi import APIRouter, Depends, status
from easyhr.api.deps import AuthContext, get_auth_context, get_auth_service, link_base
from easyhr.schemas.auth.auth import (
  CreatePasswordRequest,
  LoginRequest,
  RegisterRequest,
  ResendVerificationRequest,
  TokenResponse,
  UpdateEmailRequest,
  VerifyEmailResponse,
)
from easyhr.schemas.base import EmptyDataResponse, MessageResponse
from easyhr.schemas.users.user import UserSummary
from easyhr.services.auth import AuthService


router = APIRouter(prefix="/auth")


@router.post("/register", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def register(
  payload: RegisterRequest,
  service: AuthService = Depends(get_auth_service),
  base: str = Depends(link_base),
):
  await service.register(payload, base)
  return MessageResponse(message="Verification email sent")


@router.get("/verify-email/{token}", response_model=VerifyEmailResponse)
def verify_email(token: str, service: AuthService = Depends(get_auth_service)):
  user = service.verify_email(token)
  return VerifyEmailResponse(message="Email verified successfully", user_id=user.id, email=user.email)


@router.put("/create-password", response_model=TokenResponse, response_model_exclude_none=True)
def create_password(payload: CreatePasswordRequest, service: AuthService = Depends(get_auth_service)):
  user = service.create_password(
    payload.password,
    user_id=payload.user_id,
    email=str(payload.email) if payload.email else None,
  )
  return TokenResponse(
    message="Password created successfully",
    token=service.session_token(user),
    user=UserSummary.model_validate(user),
  )


@router.post("/login", response_model=TokenResponse, response_model_exclude_none=True)
def login(payload: LoginRequest, service: AuthService = Depends(get_auth_service)):
  token, user = service.login(str(payload.email), payload.password)
  return TokenResponse(token=token, user=UserSummary.model_validate(user))


@router.post("/resend-verification", response_model=MessageResponse)
async def resend_verification(
  payload: ResendVerificationRequest,
  service: AuthService = Depends(get_auth_service),
  base: str = Depends(link_base),
):
  await service.resend_verification(str(payload.email), base)
  return MessageResponse(message="Verification email resent")


@router.put("/update-email", response_model=MessageResponse)
async def update_email(
  payload: UpdateEmailRequest,
  service: AuthService = Depends(get_auth_service),
  base: str = Depends(link_base),
):
  await service.update_email(str(payload.current_email), str(payload.new_email), base)
  return MessageResponse(message="Email updated and verification email sent")


@router.get("/logout", response_model=EmptyDataResponse)
def logout(ctx: AuthContext = Depends(get_auth_context)):
  # Sessions are stateless; the client discards its token
  return EmptyDataResponse()
