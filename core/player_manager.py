"""
Player Manager：管理 Player 的查詢與完整生命週期

職責：
1. 列表查詢（篩選 + 排序 + 分頁）與計數
2. 建立 Player（驗證 -> 推算等級 -> 寫入）
3. 部分更新（合併 -> 驗證 -> 推算等級 -> 寫入）
4. 刪除 Player

原則：
- 篩選條件由 filter_service 建立，這裡只負責套用與執行
- 所有寫入都經過 @transactional，驗證失敗會 rollback，不會寫入不合法資料
"""
from sqlalchemy.orm import Session
from typing import List
import logging

from models import Player, PlayerOrder
from schemas import PlayerCreate, PlayerUpdate, PlayerFilter
from core.exceptions import BadRequest, PlayerNotFound
from services.filter_service import build_player_predicate
from services.validation_service import validate_player
from services.level_service import apply_level
from database import transactional, settings

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = settings.default_page_size


class PlayerManager:
    """Player 查詢與生命週期管理器"""

    @staticmethod
    def list_players(
        db: Session,
        filters: PlayerFilter,
        page_number: int = 0,
        page_size: int = DEFAULT_PAGE_SIZE,
        order: PlayerOrder = PlayerOrder.ID
    ) -> List[Player]:
        """
        取得符合條件的第 page_number 頁（從 0 開始）

        參數：
            db: SQLAlchemy Session
            filters: 篩選條件
            page_number: 頁碼（0-indexed）
            page_size: 每頁筆數
            order: 排序欄位（一律遞增，id 作為次要排序）

        返回：
            當頁的 Player 列表；頁碼超出範圍時回傳空列表

        異常：
            BadRequest: page_number < 0 或 page_size < 1
        """
        if page_number < 0:
            logger.warning(f"{page_number} - invalid page number")
            raise BadRequest(f"Page number must not be negative, got {page_number}")
        if page_size < 1:
            logger.warning(f"{page_size} - invalid page size")
            raise BadRequest(f"Page size must be at least 1, got {page_size}")

        sort_column = getattr(Player, order.field_name)
        return (
            db.query(Player)
            .filter(build_player_predicate(filters))
            .order_by(sort_column.asc(), Player.id.asc())
            .offset(page_number * page_size)
            .limit(page_size)
            .all()
        )

    @staticmethod
    def count_players(db: Session, filters: PlayerFilter) -> int:
        """符合條件的總筆數（忽略分頁）"""
        return db.query(Player).filter(build_player_predicate(filters)).count()

    @staticmethod
    @transactional
    def create_player(db: Session, data: PlayerCreate) -> Player:
        """
        建立新玩家

        流程：
        1. 拒絕客戶端指定的 id
        2. 驗證欄位
        3. 推算 level / until_next_level
        4. 寫入並取得 id

        異常：
            BadRequest: payload 帶有 id
            PlayerValidationError: 欄位不合法
        """
        if data.id is not None:
            logger.warning(f"{data.id} - id should not be set on create")
            raise BadRequest("Id must not be set when creating a player")

        player = Player(
            name=data.name,
            title=data.title,
            race=data.race,
            profession=data.profession,
            experience=data.experience,
            birthday=data.birthday,
            banned=data.banned
        )
        validate_player(player)
        apply_level(player)

        db.add(player)
        db.flush()  # 取得 player.id

        logger.info(f"Created player {player.id} ({player.name})")
        return player

    @staticmethod
    def get_player(db: Session, player_id: int) -> Player:
        """
        透過 id 取得 Player

        異常：
            BadRequest: player_id < 1
            PlayerNotFound: Player 不存在
        """
        if player_id < 1:
            logger.warning(f"{player_id} - invalid id")
            raise BadRequest(f"Id must be positive, got {player_id}")

        player = db.query(Player).filter(Player.id == player_id).first()
        if not player:
            raise PlayerNotFound(player_id)
        return player

    @staticmethod
    @transactional
    def update_player(db: Session, player_id: int, patch: PlayerUpdate) -> Player:
        """
        部分更新玩家

        流程：
        1. 取得既有 Player（錯誤同 get_player）
        2. patch 中有提供且非 None 的欄位覆寫既有值，其他欄位保持不變
        3. 驗證合併後的完整資料
        4. 重新推算 level / until_next_level

        注意：
            - id 與衍生欄位不在 PlayerUpdate 中，永遠不會被覆寫
            - 驗證失敗時 @transactional 會 rollback，合併的內容不會寫入
        """
        player = PlayerManager.get_player(db, player_id)

        changes = patch.provided_fields()
        for field, value in changes.items():
            setattr(player, field, value)

        validate_player(player)
        apply_level(player)
        db.flush()

        logger.info(f"Updated player {player_id}: {sorted(changes)}")
        return player

    @staticmethod
    @transactional
    def delete_player(db: Session, player_id: int) -> Player:
        """
        刪除玩家，返回刪除前的資料

        異常：
            BadRequest: player_id < 1
            PlayerNotFound: Player 不存在
        """
        player = PlayerManager.get_player(db, player_id)
        db.delete(player)

        logger.info(f"Deleted player {player_id}")
        return player
