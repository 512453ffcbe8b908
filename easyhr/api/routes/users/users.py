from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from easyhr.api.deps import AuthContext, get_auth_context, get_auth_service
from easyhr.db.session import get_db
from easyhr.schemas.base import DataResponse, MessageResponse
from easyhr.schemas.users.user import PasswordChange, UserProfile, UserUpdate
from easyhr.services.auth import AuthService
from easyhr.services.users import update_user_details


router = APIRouter(prefix="/users")


@router.get("/me", response_model=DataResponse[UserProfile])
def get_me(ctx: AuthContext = Depends(get_auth_context)):
  return DataResponse[UserProfile](data=UserProfile.model_validate(ctx.user))


@router.put("/me", response_model=DataResponse[UserProfile])
def update_me(payload: UserUpdate, ctx: AuthContext = Depends(get_auth_context), db: Session = Depends(get_db)):
  user = update_user_details(db, ctx.user, payload.model_dump(exclude_unset=True))
  return DataResponse[UserProfile](data=UserProfile.model_validate(user))


@router.put("/password", response_model=MessageResponse)
def update_password(
  payload: PasswordChange,
  ctx: AuthContext = Depends(get_auth_context),
  service: AuthService = Depends(get_auth_service),
):
  service.change_password(ctx.user, payload.current_password, payload.new_password)
  return MessageResponse(message="Password updated")
