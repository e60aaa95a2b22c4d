"""
時間換算服務

生日在資料庫中以「本地時區的 naive datetime」存放，
在 API 上以 epoch milliseconds 傳遞。這裡集中所有換算，
確保驗證（年份判斷）、篩選（after/before）與回應使用同一套規則。
"""
from datetime import datetime


def to_local_naive(value: datetime) -> datetime:
    """帶時區的 datetime 轉成本地時區後去掉 tzinfo；naive datetime 視為本地時間原樣返回"""
    if value.tzinfo is not None:
        return value.astimezone().replace(tzinfo=None)
    return value


def from_epoch_millis(millis: int) -> datetime:
    """
    epoch milliseconds 轉成本地時區的 naive datetime

    超出 datetime 可表示範圍的值會被夾到 datetime.min / datetime.max，
    讓任意 long 都能當作篩選邊界使用
    """
    try:
        return datetime.fromtimestamp(millis / 1000)
    except (OverflowError, OSError, ValueError):
        return datetime.min if millis < 0 else datetime.max


def to_epoch_millis(value: datetime) -> int:
    return round(value.timestamp() * 1000)


def local_year(value: datetime) -> int:
    """
    取得 datetime 在本地時區的年份

    範例（本地時區 UTC+8）：
        1999-12-31T20:00:00Z -> 2000
    """
    return to_local_naive(value).year
