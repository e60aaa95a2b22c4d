"""
服務層

這個 package 包含純計算邏輯，不負責交易控制：
- ValidationService：欄位驗證
- LevelService：等級推算
- FilterService：篩選條件組合
- TimeService：生日的時區 / epoch 換算
"""
