# app/schemas/user.py

from typing import Optional, Set, List
from datetime import date
from pydantic import BaseModel, Field, field_validator, field_serializer


class User(BaseModel):
    id: int = Field(description="사용자 ID")
    email: str = Field(description="이메일")
    login: str = Field(description="로그인")
    name: str = Field(description="사용자 이름")
    birthday: Optional[date] = Field(default=None, description="생일")
    friends: Set[int] = Field(default_factory=set, description="친구로 추가한 사용자 ID 집합")

    @field_serializer("friends")
    def _sorted_friends(self, friends: Set[int]) -> List[int]:
        return sorted(friends)


class UserCreate(BaseModel):
    email: str = Field(description="이메일", pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
    login: str = Field(description="로그인", min_length=1, pattern=r"^\S+$")
    name: Optional[str] = Field(default=None, description="사용자 이름 (비어 있으면 로그인 사용)")
    birthday: Optional[date] = Field(default=None, description="생일")

    @field_validator("birthday")
    @classmethod
    def birthday_in_past(cls, value: Optional[date]) -> Optional[date]:
        if value is not None and value >= date.today():
            raise ValueError("Birthday should be in the past.")
        return value

    def display_name(self) -> str:
        """이름이 비어 있으면 로그인으로 대체"""
        if self.name is None or not self.name.strip():
            return self.login
        return self.name


class UserUpdate(UserCreate):
    id: int = Field(description="사용자 ID")
