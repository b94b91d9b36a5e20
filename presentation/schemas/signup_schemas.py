from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class UserSignUpRequest(BaseModel):
    """Sign-up request body"""

    model_config = ConfigDict(populate_by_name=True)

    email: EmailStr = Field(..., description="The user's email address for signup")
    password: str = Field(..., description="The user's chosen password")
    confirm_password: str = Field(..., alias="confirmPassword", description="Confirmation of the password")


class SignUpResponse(BaseModel):
    """Sign-up response body"""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = Field(..., description="Whether the sign-up succeeded")
    user_id: Optional[str] = Field(None, alias="userId", description="Identifier of the new user")
    message: Optional[str] = Field(None, description="Error details on failure")
