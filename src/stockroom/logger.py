"""
Stockroomログ出力モジュール

コンソール: テキスト形式（人間が読みやすい）
ファイル: JSON形式（機械可読、分析容易）
"""

from __future__ import annotations

import fcntl
import json
from datetime import datetime
from pathlib import Path
from typing import Any


class InventoryLogger:
    """
    在庫操作のログ出力クラス

    コンソール: テキスト形式（echo=Trueの場合のみ）
    ファイル: JSON形式（1行1エントリ）
    """

    def __init__(
        self, name: str = "stockroom", log_dir: Path | None = None, echo: bool = True
    ) -> None:
        """
        ロガーを初期化する

        Args:
            name: ロガー名（ログファイル名の接頭辞）
            log_dir: ログ出力ディレクトリ（デフォルト: .stockroom/logs/）
            echo: コンソールにも出力するか
        """
        self.name = name
        self.echo = echo
        self.log_dir = log_dir if log_dir else Path(".stockroom/logs")
        self.log_dir.mkdir(parents=True, exist_ok=True)

    def _get_log_file(self) -> Path:
        """今日のログファイルパスを取得"""
        today = datetime.now().strftime("%Y%m%d")
        return self.log_dir / f"{self.name}-{today}.log"

    def log(self, level: str, message: str, **kwargs: Any) -> None:
        """
        構造化ログを出力する

        Args:
            level: ログレベル (DEBUG, INFO, WARNING, ERROR)
            message: ログメッセージ
            **kwargs: 追加の構造化データ（item_id など）
        """
        now = datetime.now()

        # コンソール: テキスト形式
        if self.echo:
            time_str = now.strftime("%H:%M:%S")
            print(f"{time_str} [{level}] {message}")

        # ファイル: JSON形式
        log_entry = {
            "timestamp": now.isoformat(),
            "level": level,
            "message": message,
            **kwargs,
        }
        with open(self._get_log_file(), "a") as f:
            fcntl.flock(f.fileno(), fcntl.LOCK_EX)
            try:
                f.write(json.dumps(log_entry, ensure_ascii=False) + "\n")
                f.flush()
            finally:
                fcntl.flock(f.fileno(), fcntl.LOCK_UN)

    def debug(self, message: str, **kwargs: Any) -> None:
        """DEBUGレベルでログ出力"""
        self.log("DEBUG", message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        """INFOレベルでログ出力"""
        self.log("INFO", message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        """WARNINGレベルでログ出力"""
        self.log("WARNING", message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        """ERRORレベルでログ出力"""
        self.log("ERROR", message, **kwargs)

    def get_log_path(self) -> Path:
        """現在のログファイルパスを返す"""
        return self._get_log_file()

    def read_entries(self, level: str | None = None) -> list[dict]:
        """
        今日のログファイルからエントリを読み込む（分析用）

        Args:
            level: フィルタ用。Noneなら全エントリ
        """
        log_file = self._get_log_file()
        if not log_file.exists():
            return []

        entries = []
        with open(log_file) as f:
            for line in f:
                line = line.strip()
                if not line:
                    continue
                try:
                    entry = json.loads(line)
                except json.JSONDecodeError:
                    continue
                if level is None or entry.get("level") == level:
                    entries.append(entry)

        return entries
