from pydantic import BaseModel, Field

class LoginRequest(BaseModel):
    email: str = Field(..., min_length=1, description="Admin email")
    password: str = Field(..., min_length=1, description="Admin password")

class LoginResponse(BaseModel):
    token: str
    shop_id: str

class TokenData(BaseModel):
    """Claims carried by an admin token"""
    shop_id: str
    role: str
