# jobboard/schema/auth_schema.py
from pydantic import BaseModel
from uuid import UUID
from jobboard.models.user import UserRole

# ----------------- Tokens -----------------
class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"

# ----------------- Session identity -----------------
class CurrentUser(BaseModel):
    """Identity of the caller, passed explicitly into every gated operation"""
    id: UUID
    email: str
    name: str
    role: UserRole

    model_config = {"from_attributes": True}
