from pydantic import BaseModel


class LoginRequest(BaseModel):
    email: str = "demo@user"


class UserRead(BaseModel):
    id: str
    email: str


class LoginResponse(BaseModel):
    token: str
    user: UserRead
