"""
等級服務：由經驗值推算等級

純計算邏輯，不涉及資料庫
"""
import math

from models import Player


def calculate_level(experience: int) -> int:
    """
    計算等級

    公式：
        level = floor((sqrt(2500 + 200 * experience) - 50) / 100)

    範例：
        calculate_level(0) -> 0
        calculate_level(100) -> 1   # (150 - 50) / 100
        calculate_level(299) -> 1
        calculate_level(300) -> 2   # (250 - 50) / 100
    """
    # isqrt 取整後再整除，結果與浮點 floor 相同且不受精度影響
    return (math.isqrt(2500 + 200 * experience) - 50) // 100


def calculate_until_next_level(level: int, experience: int) -> int:
    """
    計算距離下一級還需要多少經驗

    公式：
        until_next_level = 50 * (level + 1) * (level + 2) - experience
    """
    return 50 * (level + 1) * (level + 2) - experience


def apply_level(player: Player) -> Player:
    """
    覆寫 player 的 level 與 until_next_level

    前置條件：experience 已通過驗證（非 None 且 >= 0）
    每次建立 / 更新時在合併欄位之後呼叫一次
    """
    player.level = calculate_level(player.experience)
    player.until_next_level = calculate_until_next_level(player.level, player.experience)
    return player
