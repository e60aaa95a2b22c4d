"""
API 請求 / 回應的 Pydantic schema

欄位內容（長度、範圍、年份）不在這裡檢查，
統一交給 services.validation_service，讓所有錯誤都以 400 回報。
這裡只負責型別與列舉值的反序列化。
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from models import Race, Profession
from services.time_service import from_epoch_millis, to_local_naive, to_epoch_millis


def birthday_from_wire(value):
    """
    數字（或純數字字串）一律視為 epoch milliseconds

    pydantic 預設會把小於 2e10 的數字當成秒，這裡先轉成 datetime 避免誤判；
    ISO 字串等其他格式照常交給 pydantic 解析
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.lstrip("-").isdigit():
        value = int(value)
    if isinstance(value, (int, float)):
        return from_epoch_millis(value)
    return value


class PlayerCreate(BaseModel):
    """建立玩家的 payload；id 只為了偵測客戶端違規指定"""
    id: Optional[int] = None
    name: Optional[str] = None
    title: Optional[str] = None
    race: Race
    profession: Profession
    birthday: Optional[datetime] = None
    banned: Optional[bool] = None
    experience: Optional[int] = None

    @field_validator("birthday", mode="before")
    @classmethod
    def _birthday_from_millis(cls, value):
        return birthday_from_wire(value)

    @field_validator("birthday")
    @classmethod
    def _birthday_to_local(cls, value):
        return to_local_naive(value) if value is not None else None


class PlayerUpdate(BaseModel):
    """
    部分更新的 payload

    所有欄位皆為 Optional：None（或未提供）代表「保持原值」，
    無法透過更新把欄位清成 null。id 與衍生欄位不在此 schema 中，因此永遠不會被覆寫。
    """
    name: Optional[str] = None
    title: Optional[str] = None
    race: Optional[Race] = None
    profession: Optional[Profession] = None
    birthday: Optional[datetime] = None
    banned: Optional[bool] = None
    experience: Optional[int] = None

    @field_validator("birthday", mode="before")
    @classmethod
    def _birthday_from_millis(cls, value):
        return birthday_from_wire(value)

    @field_validator("birthday")
    @classmethod
    def _birthday_to_local(cls, value):
        return to_local_naive(value) if value is not None else None

    def provided_fields(self) -> dict:
        """有提供且非 None 的欄位"""
        return {
            field: getattr(self, field)
            for field in self.model_fields_set
            if getattr(self, field) is not None
        }


class PlayerResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    name: str
    title: str
    race: Race
    profession: Profession
    experience: int
    level: int
    until_next_level: int = Field(alias="untilNextLevel")
    birthday: datetime
    banned: bool

    @field_validator("birthday", mode="before")
    @classmethod
    def _birthday_from_millis(cls, value):
        return birthday_from_wire(value)

    @field_serializer("birthday")
    def _birthday_to_millis(self, value: datetime) -> int:
        return to_epoch_millis(value)


class PlayerFilter(BaseModel):
    """
    列表 / 計數共用的篩選條件

    所有欄位皆為 Optional，None 表示不套用該條件（而不是用預設值篩選）
    after / before 為 epoch milliseconds
    """
    name: Optional[str] = None
    title: Optional[str] = None
    race: Optional[Race] = None
    profession: Optional[Profession] = None
    after: Optional[int] = None
    before: Optional[int] = None
    banned: Optional[bool] = None
    min_experience: Optional[int] = None
    max_experience: Optional[int] = None
    min_level: Optional[int] = None
    max_level: Optional[int] = None
