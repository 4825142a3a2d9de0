"""機会収集モジュール.

処理フロー:
  1. クライアント × キーワードの組み合わせを順に処理
  2. 各キーワードで登録済みアダプタを登録順に呼び出す
  3. アダプタの例外はその呼び出しだけ空扱いにして続行
  4. 全件を連結したあと URL で重複排除
"""

from __future__ import annotations

import logging

from engagement_finder.config import ADAPTER_REGISTRY
from engagement_finder.models import Client, Opportunity
from engagement_finder.processor import dedupe
from engagement_finder.sources import (
    Adapter,
    search_facebook,
    search_hackernews,
    search_indiehackers,
    search_linkedin,
    search_producthunt,
    search_quora,
    search_reddit,
    search_stackoverflow,
    search_twitter,
)

logger = logging.getLogger(__name__)

REGISTRIES: dict[str, list[tuple[str, Adapter]]] = {
    "social": [
        ("reddit", search_reddit),
        ("quora", search_quora),
        ("facebook", search_facebook),
        ("linkedin", search_linkedin),
        ("twitter", search_twitter),
    ],
    "community": [
        ("reddit", search_reddit),
        ("quora", search_quora),
        ("stackoverflow", search_stackoverflow),
        ("hackernews", search_hackernews),
        ("producthunt", search_producthunt),
        ("indiehackers", search_indiehackers),
    ],
}


def get_adapters(name: str = ADAPTER_REGISTRY) -> list[tuple[str, Adapter]]:
    """名前からアダプタ一覧を取得する."""
    try:
        return REGISTRIES[name]
    except KeyError:
        raise ValueError(
            f"unknown adapter registry: {name!r} (choose from {', '.join(REGISTRIES)})"
        ) from None


def _run_adapter(name: str, adapter: Adapter, keyword: str, client_id: str) -> list[Opportunity]:
    """アダプタを 1 回呼び出す。例外は記録して空リストを返す."""
    try:
        return adapter(keyword, client_id)
    except Exception:
        logger.exception("アダプタ失敗: adapter=%s, keyword=%s", name, keyword)
        return []


def collect(
    clients: list[Client], adapters: list[tuple[str, Adapter]] | None = None
) -> list[Opportunity]:
    """全クライアントの全キーワードについて機会を収集する.

    Args:
        clients: 対象クライアント
        adapters: (名前, アダプタ) のリスト。省略時は設定のレジストリ。

    Returns:
        クライアント順 → キーワード順 → アダプタ登録順 → アダプタ内の順位順に並び、
        URL で重複排除した機会のリスト。
    """
    if adapters is None:
        adapters = get_adapters()

    collected: list[Opportunity] = []
    for client in clients:
        for keyword in client.keywords:
            logger.info("検索中: client=%s, keyword=%s", client.name, keyword)
            for name, adapter in adapters:
                results = _run_adapter(name, adapter, keyword, client.id)
                logger.debug("  %s → %d 件", name, len(results))
                collected.extend(results)

    unique = dedupe(collected)
    logger.info("収集完了: %d 件（重複排除前 %d 件）", len(unique), len(collected))
    return unique
