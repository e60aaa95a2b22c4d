"""
自定義異常類別

集中管理所有業務邏輯異常，方便 API 層統一處理：
- BadRequest（含 PlayerValidationError）-> HTTP 400
- PlayerNotFound -> HTTP 404
"""


class PlayerServiceException(Exception):
    """所有業務異常的基類"""
    pass


# ============ 輸入異常 ============

class BadRequest(PlayerServiceException):
    """輸入格式不合法（客戶端指定 id、id < 1、分頁參數錯誤等）"""
    pass


class PlayerValidationError(BadRequest):
    """欄位驗證失敗，記錄是哪個欄位、為什麼失敗"""
    def __init__(self, field, reason):
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid {field}: {reason}")


# ============ Player 相關異常 ============

class PlayerNotFound(PlayerServiceException):
    """玩家不存在"""
    def __init__(self, player_id):
        self.player_id = player_id
        super().__init__(f"Player {player_id} not found")
