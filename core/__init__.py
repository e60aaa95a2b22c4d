"""
核心業務邏輯層

這個 package 包含：
- PlayerManager：Player 的查詢（篩選/分頁/排序）與生命週期
- Exceptions：API 層統一對應成 HTTP 狀態碼的業務異常
"""
