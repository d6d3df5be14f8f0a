"""
Pydantic schemas
Request/response validation; responses serialize with camelCase keys
"""
from datetime import datetime
from typing import List
from pydantic import BaseModel, Field, ConfigDict


# ============== Hotel Schemas ==============

class HotelResponse(BaseModel):
    id: int
    name: str
    image: str
    created_at: datetime = Field(serialization_alias="createdAt")
    updated_at: datetime = Field(serialization_alias="updatedAt")
    model_config = ConfigDict(from_attributes=True)


class RoomResponse(BaseModel):
    id: int
    name: str
    capacity: int
    hotel_id: int = Field(serialization_alias="hotelId")
    created_at: datetime = Field(serialization_alias="createdAt")
    updated_at: datetime = Field(serialization_alias="updatedAt")
    model_config = ConfigDict(from_attributes=True)


class HotelWithRoomsResponse(HotelResponse):
    rooms: List[RoomResponse] = Field(default_factory=list, serialization_alias="Rooms")


# ============== Auth Schemas ==============

class SignInRequest(BaseModel):
    email: str = Field(..., min_length=3, max_length=255)
    password: str = Field(..., min_length=1)


class SignInUser(BaseModel):
    id: int
    email: str
    model_config = ConfigDict(from_attributes=True)


class SignInResponse(BaseModel):
    user: SignInUser
    token: str
