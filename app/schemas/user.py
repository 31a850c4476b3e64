from pydantic import BaseModel, Field


class UserCreate(BaseModel):
    username: str = Field(min_length=1)


class UserResponse(BaseModel):
    id: str
    username: str

    model_config = {"from_attributes": True}
