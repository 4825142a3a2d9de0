"""機会リストの加工モジュール — 重複排除・意図判定・絞り込み・並べ替え."""

from __future__ import annotations

import logging
import math
from collections import Counter
from dataclasses import replace
from datetime import datetime

from engagement_finder.models import PLATFORMS, Client, FilterCriteria, Opportunity

logger = logging.getLogger(__name__)

POSITIVE_KEYWORDS = [
    "recommend", "love", "great", "excellent", "amazing",
    "fantastic", "perfect", "brilliant", "outstanding", "superb",
]
NEGATIVE_KEYWORDS = [
    "hate", "terrible", "awful", "worst", "horrible",
    "useless", "rubbish", "disappointing", "poor", "bad",
]
QUESTION_KEYWORDS = [
    "how", "what", "where", "when", "why",
    "which", "help", "advice", "suggestion", "recommendation",
]

SORT_KEYS = ("discoveredAt", "rankingPosition", "platform", "keyword", "client")
DEFAULT_SORT_KEY = "discoveredAt"

RECENT_LIMIT = 5


def classify_intent(text: str) -> str:
    """テキストの意図を positive / negative / neutral / question に分類する.

    判定は単純な部分一致。優先順位:
      1. 質問語または "?" を含む → question
      2. ネガティブ語のみ → negative
      3. ポジティブ語のみ → positive
      4. それ以外（両方含む場合も） → neutral
    """
    lower = text.lower()

    has_positive = any(word in lower for word in POSITIVE_KEYWORDS)
    has_negative = any(word in lower for word in NEGATIVE_KEYWORDS)
    has_question = any(word in lower for word in QUESTION_KEYWORDS) or "?" in lower

    if has_question:
        return "question"
    if has_negative and not has_positive:
        return "negative"
    if has_positive and not has_negative:
        return "positive"
    return "neutral"


def dedupe(opportunities: list[Opportunity]) -> list[Opportunity]:
    """URL が重複する機会を除く（最初に出現したものを残す）."""
    seen: set[str] = set()
    unique: list[Opportunity] = []
    for opp in opportunities:
        if opp.url in seen:
            continue
        seen.add(opp.url)
        unique.append(opp)

    if len(unique) < len(opportunities):
        logger.debug("重複排除: %d → %d 件", len(opportunities), len(unique))
    return unique


def filter_opportunities(
    opportunities: list[Opportunity], criteria: FilterCriteria
) -> list[Opportunity]:
    """条件をすべて満たす機会だけを返す（未指定の条件は無視）."""
    keyword = (criteria.keyword or "").lower()

    def _match(opp: Opportunity) -> bool:
        if criteria.client_id and opp.client_id != criteria.client_id:
            return False
        if criteria.platform and opp.platform != criteria.platform:
            return False
        if keyword and keyword not in opp.keyword.lower():
            return False
        if criteria.visited is not None and opp.visited != criteria.visited:
            return False
        return True

    return [opp for opp in opportunities if _match(opp)]


def _parse_timestamp(value: str) -> datetime:
    # Python 3.10 以前の fromisoformat は末尾の "Z" を受け付けない
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def sort_opportunities(
    opportunities: list[Opportunity],
    key: str = DEFAULT_SORT_KEY,
    direction: str = "desc",
    clients: list[Client] | None = None,
) -> list[Opportunity]:
    """機会を並べ替える.

    Args:
        key: SORT_KEYS のいずれか。未知のキーは discoveredAt 扱い。
        direction: "asc" or "desc"
        clients: key="client" のときにクライアント名を引くためのリスト

    同じ値同士は入力順を保つ（降順でも安定）。
    """
    names = {c.id: c.name for c in clients or []}

    def sort_key(opp: Opportunity):
        if key == "rankingPosition":
            return opp.ranking_position
        if key == "platform":
            return opp.platform.lower()
        if key == "keyword":
            return opp.keyword.lower()
        if key == "client":
            return names.get(opp.client_id, "").lower()
        return _parse_timestamp(opp.discovered_at)

    # reverse=True でも sorted は安定
    return sorted(opportunities, key=sort_key, reverse=(direction == "desc"))


def mark_visited(opportunities: list[Opportunity], opportunity_id: str) -> list[Opportunity]:
    """指定 ID の機会を訪問済みにした新しいリストを返す.

    ID が見つからなければ入力と同じ内容を返す。visited を False に戻すことはない。
    """
    return [
        replace(opp, visited=True) if opp.id == opportunity_id else opp
        for opp in opportunities
    ]


def summarize(clients: list[Client], opportunities: list[Opportunity]) -> dict:
    """ダッシュボード用の集計値を返す."""
    total = len(opportunities)
    # 0.5 は切り上げ
    avg_rank = (
        math.floor(sum(opp.ranking_position for opp in opportunities) / total + 0.5)
        if total else 0
    )
    counts = Counter(opp.platform for opp in opportunities)

    return {
        "total_clients": len(clients),
        "total_keywords": sum(len(c.keywords) for c in clients),
        "total_opportunities": total,
        "average_ranking_position": avg_rank,
        "platform_counts": {p: counts.get(p, 0) for p in PLATFORMS},
        "recent": sort_opportunities(opportunities, "discoveredAt", "desc")[:RECENT_LIMIT],
    }
