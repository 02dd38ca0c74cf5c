from typing import Optional

from pydantic import AliasChoices, BaseModel, Field

from cookbook_auth.services.auth import LoginInput, SignupInput

class SignupIn(BaseModel):
    full_name: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("full_name", "fullname")
    )
    email: Optional[str] = None
    password: Optional[str] = None

    def to_input(self) -> SignupInput:
        return SignupInput(full_name=self.full_name, email=self.email, password=self.password)

class LoginIn(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None

    def to_input(self) -> LoginInput:
        return LoginInput(email=self.email, password=self.password)

class MessageOut(BaseModel):
    message: str
