"""
資料模型：Player 及其列舉型別

Enum 欄位以名稱字串（例如 "HUMAN"）存入資料庫
"""
import enum

from sqlalchemy import Boolean, Column, DateTime, Enum, Integer, String

from database import Base


class Race(str, enum.Enum):
    HUMAN = "HUMAN"
    DWARF = "DWARF"
    ELF = "ELF"
    GIANT = "GIANT"
    ORC = "ORC"
    TROLL = "TROLL"
    HOBBIT = "HOBBIT"


class Profession(str, enum.Enum):
    WARRIOR = "WARRIOR"
    ROGUE = "ROGUE"
    SORCERER = "SORCERER"
    CLERIC = "CLERIC"
    PALADIN = "PALADIN"
    NAZGUL = "NAZGUL"
    WARLOCK = "WARLOCK"
    DRUID = "DRUID"


class PlayerOrder(str, enum.Enum):
    """列表排序欄位（封閉集合），一律遞增排序"""
    ID = "ID"
    NAME = "NAME"
    EXPERIENCE = "EXPERIENCE"
    BIRTHDAY = "BIRTHDAY"
    LEVEL = "LEVEL"

    @property
    def field_name(self) -> str:
        return self.value.lower()


class Player(Base):
    __tablename__ = "player"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(12), nullable=False)
    title = Column(String(30), nullable=False)
    race = Column(Enum(Race, native_enum=False), nullable=False)
    profession = Column(Enum(Profession, native_enum=False), nullable=False)
    experience = Column(Integer, nullable=False)
    level = Column(Integer, nullable=False)
    until_next_level = Column("untilNextLevel", Integer, nullable=False)
    birthday = Column(DateTime, nullable=False)
    banned = Column(Boolean, nullable=False, default=False)

    def __repr__(self):
        return (
            f"<Player(id={self.id}, name='{self.name}', title='{self.title}', "
            f"race={self.race}, profession={self.profession}, "
            f"experience={self.experience}, level={self.level}, "
            f"until_next_level={self.until_next_level}, "
            f"birthday={self.birthday}, banned={self.banned})>"
        )
