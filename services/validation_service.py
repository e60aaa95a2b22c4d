"""
驗證服務：寫入資料庫前檢查 Player 欄位

只檢查 name / title / experience / birthday，
race / profession 的合法性由 schemas 反序列化時負責
"""
import logging

from models import Player
from core.exceptions import PlayerValidationError
from services.time_service import local_year

logger = logging.getLogger(__name__)

MAX_NAME_LENGTH = 12
MAX_TITLE_LENGTH = 30
MAX_EXPERIENCE = 10_000_000
MIN_BIRTHDAY_YEAR = 2000
MAX_BIRTHDAY_YEAR = 3000


def _reject(field: str, value, reason: str):
    logger.warning(f"{value!r} - invalid {field}: {reason}")
    raise PlayerValidationError(field, reason)


def validate_player(player: Player) -> Player:
    """
    驗證一個完整的 Player（合併後、寫入前）

    規則：
    - name: 必填、非空、長度 <= 12
    - title: 必填、長度 <= 30
    - experience: 必填、0 ~ 10,000,000
    - birthday: 必填、本地時區年份 2000 ~ 3000

    副作用：
        banned 為 None 時設為 False（唯一會修改的欄位）

    異常：
        PlayerValidationError: 任一欄位不合法
    """
    if player.name is None or player.name == "":
        _reject("name", player.name, "must not be empty")
    if len(player.name) > MAX_NAME_LENGTH:
        _reject("name", player.name, f"must be at most {MAX_NAME_LENGTH} characters")

    if player.title is None:
        _reject("title", player.title, "is required")
    if len(player.title) > MAX_TITLE_LENGTH:
        _reject("title", player.title, f"must be at most {MAX_TITLE_LENGTH} characters")

    if player.experience is None:
        _reject("experience", player.experience, "is required")
    if player.experience < 0 or player.experience > MAX_EXPERIENCE:
        _reject("experience", player.experience, f"must be between 0 and {MAX_EXPERIENCE}")

    if player.birthday is None:
        _reject("birthday", player.birthday, "is required")
    year = local_year(player.birthday)
    if year < MIN_BIRTHDAY_YEAR or year > MAX_BIRTHDAY_YEAR:
        _reject(
            "birthday", player.birthday,
            f"year {year} is outside {MIN_BIRTHDAY_YEAR}...{MAX_BIRTHDAY_YEAR}"
        )

    if player.banned is None:
        player.banned = False

    return player
