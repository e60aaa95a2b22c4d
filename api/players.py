"""
Player API Endpoints

職責：
1. 玩家列表（篩選 + 分頁 + 排序）與計數
2. 建立 / 查詢 / 更新 / 刪除玩家

所有業務邏輯集中在 PlayerManager，這裡只負責參數轉換與錯誤對應：
- BadRequest -> 400
- PlayerNotFound -> 404
- 其他 -> 500
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session
import logging

from database import get_db, settings
from models import Race, Profession, PlayerOrder
from schemas import PlayerCreate, PlayerUpdate, PlayerResponse, PlayerFilter
from core.player_manager import PlayerManager
from core.exceptions import BadRequest, PlayerNotFound

router = APIRouter(prefix="/rest/players", tags=["players"])
logger = logging.getLogger(__name__)


def get_player_filter(
    name: Optional[str] = Query(None),
    title: Optional[str] = Query(None),
    race: Optional[Race] = Query(None),
    profession: Optional[Profession] = Query(None),
    after: Optional[int] = Query(None, description="epoch ms, inclusive"),
    before: Optional[int] = Query(None, description="epoch ms, exclusive"),
    banned: Optional[bool] = Query(None),
    min_experience: Optional[int] = Query(None, alias="minExperience"),
    max_experience: Optional[int] = Query(None, alias="maxExperience"),
    min_level: Optional[int] = Query(None, alias="minLevel"),
    max_level: Optional[int] = Query(None, alias="maxLevel"),
) -> PlayerFilter:
    """列表與計數共用的篩選參數"""
    return PlayerFilter(
        name=name,
        title=title,
        race=race,
        profession=profession,
        after=after,
        before=before,
        banned=banned,
        min_experience=min_experience,
        max_experience=max_experience,
        min_level=min_level,
        max_level=max_level
    )


@router.get("", response_model=List[PlayerResponse])
def list_players(
    filters: PlayerFilter = Depends(get_player_filter),
    page_number: int = Query(0, alias="pageNumber"),
    page_size: int = Query(settings.default_page_size, alias="pageSize"),
    order: PlayerOrder = Query(PlayerOrder.ID),
    db: Session = Depends(get_db)
):
    """
    取得玩家列表（當頁）

    頁碼從 0 開始，超出範圍時返回空列表
    """
    logger.info(f"GET /rest/players page={page_number} size={page_size} order={order.value}")
    try:
        players = PlayerManager.list_players(db, filters, page_number, page_size, order)
        return [PlayerResponse.model_validate(player) for player in players]

    except BadRequest as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Failed to list players: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal error")


@router.get("/count", response_model=int)
def count_players(
    filters: PlayerFilter = Depends(get_player_filter),
    db: Session = Depends(get_db)
):
    """符合條件的玩家總數（忽略分頁）"""
    logger.info("GET /rest/players/count")
    try:
        return PlayerManager.count_players(db, filters)

    except Exception as e:
        logger.error(f"Failed to count players: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal error")


@router.post("", response_model=PlayerResponse)
def create_player(player_data: PlayerCreate, db: Session = Depends(get_db)):
    """
    建立玩家

    前置條件：
    - payload 不能帶 id
    - 欄位必須通過驗證（見 validation_service）
    """
    logger.info("POST /rest/players")
    try:
        player = PlayerManager.create_player(db, player_data)
        return PlayerResponse.model_validate(player)

    except BadRequest as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Failed to create player: {e}", exc_info=True)
        db.rollback()
        raise HTTPException(status_code=500, detail="Internal error")


@router.get("/{player_id}", response_model=PlayerResponse)
def get_player(player_id: int, db: Session = Depends(get_db)):
    logger.info(f"GET /rest/players/{player_id}")
    try:
        player = PlayerManager.get_player(db, player_id)
        return PlayerResponse.model_validate(player)

    except BadRequest as e:
        raise HTTPException(status_code=400, detail=str(e))
    except PlayerNotFound:
        raise HTTPException(status_code=404, detail="Player not found")
    except Exception as e:
        logger.error(f"Failed to get player: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal error")


@router.post("/{player_id}", response_model=PlayerResponse)
def update_player(player_id: int, patch: PlayerUpdate, db: Session = Depends(get_db)):
    """
    部分更新玩家

    只覆寫 payload 中有提供且非 null 的欄位，
    之後重新驗證並重新推算等級
    """
    logger.info(f"POST /rest/players/{player_id}")
    try:
        player = PlayerManager.update_player(db, player_id, patch)
        return PlayerResponse.model_validate(player)

    except BadRequest as e:
        raise HTTPException(status_code=400, detail=str(e))
    except PlayerNotFound:
        raise HTTPException(status_code=404, detail="Player not found")
    except Exception as e:
        logger.error(f"Failed to update player: {e}", exc_info=True)
        db.rollback()
        raise HTTPException(status_code=500, detail="Internal error")


@router.delete("/{player_id}", response_model=PlayerResponse)
def delete_player(player_id: int, db: Session = Depends(get_db)):
    """刪除玩家，返回刪除前的資料"""
    logger.info(f"DELETE /rest/players/{player_id}")
    try:
        player = PlayerManager.delete_player(db, player_id)
        return PlayerResponse.model_validate(player)

    except BadRequest as e:
        raise HTTPException(status_code=400, detail=str(e))
    except PlayerNotFound:
        raise HTTPException(status_code=404, detail="Player not found")
    except Exception as e:
        logger.error(f"Failed to delete player: {e}", exc_info=True)
        db.rollback()
        raise HTTPException(status_code=500, detail="Internal error")
