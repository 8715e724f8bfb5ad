"""
src/stockroom/helpers.py - ヘルパー関数

オペレーター入力の解析と表示用フォーマットを提供する。
"""

import math
import re

# ASCII数字のみ（"1_000" や全角・アラビア数字は不正）
INT_PATTERN = re.compile(r"[+-]?[0-9]+")
PRICE_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def parse_int(text: str) -> int | None:
    """
    入力行を整数として解析する

    Args:
        text: 入力行（前後の空白は無視）

    Returns:
        整数。解析できない場合はNone
    """
    text = text.strip()
    if not INT_PATTERN.fullmatch(text):
        return None
    return int(text)


def parse_price(text: str) -> float | None:
    """
    入力行を価格（浮動小数点数）として解析する

    nan / inf やオーバーフローする値は不正な入力として扱う。

    Args:
        text: 入力行（前後の空白は無視）

    Returns:
        有限の浮動小数点数。解析できない場合はNone
    """
    text = text.strip()
    if not PRICE_PATTERN.fullmatch(text):
        return None
    value = float(text)
    if not math.isfinite(value):
        return None
    return value


def format_price(value: float, currency: str = "$") -> str:
    """
    価格を表示用の文字列に変換する

    Args:
        value: 価格
        currency: 通貨記号

    Returns:
        "$12.00" 形式の文字列
    """
    return f"{currency}{value:.2f}"
