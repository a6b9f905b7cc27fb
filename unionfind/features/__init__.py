"""
功能模組

- connectivity_filter: 冗餘連線過濾
- simulation: 隨機連通模擬
"""
