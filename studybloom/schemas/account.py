"""
Account schemas for the local mock sign-in.
"""

from pydantic import BaseModel, Field, computed_field
from typing import Optional
from datetime import datetime
from enum import Enum


class UserRole(str, Enum):
    STUDENT = "student"
    EDUCATOR = "educator"
    ADMIN = "admin"


class UserPreferences(BaseModel):
    theme: str = "light"  # light, dark, auto
    notifications: bool = True
    public_profile: bool = True


class UserStats(BaseModel):
    courses_created: int = 0
    courses_completed: int = 0
    total_study_time: int = 0  # minutes


class UserProfile(BaseModel):
    id: str
    email: str
    username: str
    first_name: str
    last_name: str
    bio: str = ""
    avatar: Optional[str] = None
    role: UserRole = UserRole.STUDENT
    join_date: datetime
    preferences: UserPreferences = Field(default_factory=UserPreferences)
    stats: UserStats = Field(default_factory=UserStats)

    @computed_field
    @property
    def display_name(self) -> str:
        full = f"{self.first_name} {self.last_name}".strip()
        return full or self.username


class SignupData(BaseModel):
    email: str = Field(..., min_length=3)
    password: str = Field(..., min_length=1)
    username: str = Field(..., min_length=1)
    first_name: str = ""
    last_name: str = ""
    role: UserRole = UserRole.STUDENT
