from pydantic import BaseModel, ConfigDict


class UserBase(BaseModel):
    name: str
    # kept exactly as given; lookups are by exact match
    email: str


class UserCreate(UserBase):
    password: str


class UserResponse(UserBase):
    id: int
    password: str

    model_config = ConfigDict(from_attributes=True)
