"""
篩選服務：把可選的篩選條件組成一個查詢條件（predicate）

設計：
- 每個條件都是獨立的函式，回傳 SQLAlchemy clause，或 None（條件未提供）
- all_of() 是明確的 AND 組合器，自動略過 None
- 只建立條件、不執行查詢：同一個 predicate 可同時用於分頁查詢與計數查詢
"""
from typing import Optional

from sqlalchemy import and_, true
from sqlalchemy.sql.elements import ColumnElement

from models import Player, Race, Profession
from schemas import PlayerFilter
from services.time_service import from_epoch_millis

Predicate = Optional[ColumnElement]


def all_of(*predicates: Predicate) -> ColumnElement:
    """
    AND 組合器

    - None（未提供的條件）不會產生任何限制
    - 沒有任何條件時回傳 true()，等同不篩選
    """
    clauses = [p for p in predicates if p is not None]
    if not clauses:
        return true()
    return and_(*clauses)


def filter_by_name(name: Optional[str]) -> Predicate:
    """名稱子字串（區分大小寫、不錨定）"""
    if name is None:
        return None
    return Player.name.contains(name, autoescape=True)


def filter_by_title(title: Optional[str]) -> Predicate:
    if title is None:
        return None
    return Player.title.contains(title, autoescape=True)


def filter_by_race(race: Optional[Race]) -> Predicate:
    if race is None:
        return None
    return Player.race == race


def filter_by_profession(profession: Optional[Profession]) -> Predicate:
    if profession is None:
        return None
    return Player.profession == profession


def filter_by_birthday(after: Optional[int], before: Optional[int]) -> Predicate:
    """
    生日區間：after <= birthday < before

    參數：
        after / before: epoch milliseconds，可以只提供其中一個
    """
    if after is None and before is None:
        return None
    return all_of(
        Player.birthday >= from_epoch_millis(after) if after is not None else None,
        Player.birthday < from_epoch_millis(before) if before is not None else None,
    )


def filter_by_banned(banned: Optional[bool]) -> Predicate:
    if banned is None:
        return None
    return Player.banned == banned


def _between(column, minimum: Optional[int], maximum: Optional[int]) -> Predicate:
    """閉區間 [minimum, maximum]，可以只提供單邊"""
    if minimum is None and maximum is None:
        return None
    return all_of(
        column >= minimum if minimum is not None else None,
        column <= maximum if maximum is not None else None,
    )


def filter_by_experience(min_experience: Optional[int], max_experience: Optional[int]) -> Predicate:
    return _between(Player.experience, min_experience, max_experience)


def filter_by_level(min_level: Optional[int], max_level: Optional[int]) -> Predicate:
    return _between(Player.level, min_level, max_level)


def build_player_predicate(filters: PlayerFilter) -> ColumnElement:
    """
    把 PlayerFilter 的所有條件 AND 起來

    參數：
        filters: PlayerFilter（欄位皆可為 None）

    返回：
        可直接傳給 Query.filter() 的 clause
    """
    return all_of(
        filter_by_name(filters.name),
        filter_by_title(filters.title),
        filter_by_race(filters.race),
        filter_by_profession(filters.profession),
        filter_by_birthday(filters.after, filters.before),
        filter_by_banned(filters.banned),
        filter_by_experience(filters.min_experience, filters.max_experience),
        filter_by_level(filters.min_level, filters.max_level),
    )
