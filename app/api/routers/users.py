from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.api.deps import get_current_user
from app.data.database import get_db
from app.data.models.user import UserModel
from app.domain.errors import ApiError
from app.domain.schemas import AddressIn, AddressOut, UserOut
from app.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])


def _ensure_self(user_id: int, current_user: UserModel) -> None:
    if current_user.id != user_id:
        raise HTTPException(
            status_code=403,
            detail="User not authorized to access this resource",
        )


@router.get("/{user_id}")
def get_user(
    user_id: int,
    q: str | None = Query(None),
    current_user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    _ensure_self(user_id, current_user)
    service = UserService(db)
    try:
        if q == "address":
            return service.get_user_address_by_id(user_id)
        user = service.get_user_by_id(user_id)
        return UserOut.model_validate(user).model_dump(by_alias=True, mode="json")
    except ApiError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.put("/{user_id}", response_model=AddressOut)
def set_address(
    user_id: int,
    payload: AddressIn,
    current_user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    _ensure_self(user_id, current_user)
    address = UserService(db).set_address(current_user, payload.address)
    return {"address": address}
