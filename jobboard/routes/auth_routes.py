from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm
from pydantic import TypeAdapter
from sqlalchemy.orm import Session

from jobboard.crud import user_crud
from jobboard.database import get_db
from jobboard.exceptions import EmailAlreadyRegisteredError
from jobboard.schema.auth_schema import CurrentUser, Token
from jobboard.schema.user_schema import UserCreate, UserProfileResponse, UserResponse
from jobboard.utils.security import create_access_token, get_current_user

router = APIRouter(prefix="/auth", tags=["auth"])

user_profile_adapter = TypeAdapter(UserProfileResponse)

# --------------------------
# Registration
# --------------------------
@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def register(user_in: UserCreate, db: Session = Depends(get_db)):
    """Register a job seeker or job provider along with an empty profile"""
    try:
        user = user_crud.register_user(
            db,
            name=user_in.name,
            email=user_in.email,
            password=user_in.password,
            role=user_in.role
        )
    except EmailAlreadyRegisteredError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return user

# --------------------------
# Login
# --------------------------
@router.post("/login", response_model=Token)
def login_user(form_data: OAuth2PasswordRequestForm = Depends(), db: Session = Depends(get_db)):
    user = user_crud.authenticate_user(db, form_data.username, form_data.password)
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")
    token = create_access_token({"sub": str(user.id), "role": user.role.value})
    return {"access_token": token, "token_type": "bearer"}

# --------------------------
# Current user
# --------------------------
@router.get("/me", response_model=UserProfileResponse)
def get_me(db: Session = Depends(get_db), current_user: CurrentUser = Depends(get_current_user)):
    user = user_crud.get_user_profile(db, current_user)
    return user_profile_adapter.validate_python(user, from_attributes=True)
