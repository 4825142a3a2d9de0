"""CSV エクスポート."""

from __future__ import annotations

import csv
import io
import logging
from datetime import date, datetime
from pathlib import Path

from engagement_finder.models import Client, Opportunity

logger = logging.getLogger(__name__)

HEADERS = [
    "Client Name", "Keyword", "Platform", "URL", "Title",
    "Intent", "Ranking Position", "Discovered At", "Visited",
]


def _format_date(value: str) -> str:
    # 月/日/年（年は4桁）
    d = datetime.fromisoformat(value.replace("Z", "+00:00")).astimezone()
    return f"{d.month}/{d.day}/{d.year}"


def to_csv(opportunities: list[Opportunity], clients: list[Client]) -> str:
    """機会リストを全項目クォートの CSV 文字列にする.

    クライアントが見つからない行は "Unknown"。
    """
    names = {c.id: c.name for c in clients}
    buf = io.StringIO()
    writer = csv.writer(buf, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(HEADERS)
    for opp in opportunities:
        writer.writerow([
            names.get(opp.client_id, "Unknown"),
            opp.keyword,
            opp.platform,
            opp.url,
            opp.title,
            opp.intent or "",
            str(opp.ranking_position),
            _format_date(opp.discovered_at),
            "Yes" if opp.visited else "No",
        ])
    return buf.getvalue().rstrip("\n")


def export_filename(today: date | None = None) -> str:
    today = today or date.today()
    return f"keyword-opportunities-{today.isoformat()}.csv"


def write_csv(
    opportunities: list[Opportunity], clients: list[Client], path: Path | str | None = None
) -> Path:
    """CSV をファイルに書き出してパスを返す."""
    path = Path(path) if path else Path(export_filename())
    path.write_text(to_csv(opportunities, clients), encoding="utf-8")
    logger.info("CSV 出力: %s (%d 件)", path, len(opportunities))
    return path
