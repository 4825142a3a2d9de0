"""検索ソース（アダプタ）モジュール.

各アダプタは (keyword, client_id) -> list[Opportunity] の関数。
  - Reddit: 公開検索 JSON を取得（失敗時は固定データにフォールバック）
  - その他: 固定データをキーワードの部分一致で絞り込む
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable
from urllib.parse import quote

import requests
from bs4 import BeautifulSoup

from engagement_finder import fixtures
from engagement_finder.config import (
    REDDIT_BASE_URL,
    REDDIT_SEARCH_URL_TEMPLATE,
    REQUEST_TIMEOUT,
    USER_AGENT,
)
from engagement_finder.models import Opportunity
from engagement_finder.processor import classify_intent

logger = logging.getLogger(__name__)

REDDIT_FALLBACK_LIMIT = 2

Adapter = Callable[[str, str], list[Opportunity]]


def _timestamp() -> tuple[str, int]:
    """(ISO 8601 文字列, エポックミリ秒) を返す."""
    now = datetime.now(timezone.utc)
    return now.isoformat(), int(now.timestamp() * 1000)


def make_opportunity_id(
    client_id: str, keyword: str, platform: str, record_id: str, timestamp_ms: int
) -> str:
    """Opportunity の ID を組み立てる.

    同一ミリ秒内に同じレコードを生成した場合のみ衝突する。
    """
    return f"{client_id}-{keyword}-{platform}-{record_id}-{timestamp_ms}"


def matches_keyword(
    keyword: str, title: str, snippet: str = "", match_tokens: bool = True
) -> bool:
    """タイトル・本文がキーワード（またはその単語のいずれか）を含むか判定する.

    大文字小文字は区別しない。
    """
    kw = keyword.lower()
    texts = [title.lower(), snippet.lower()]
    if any(kw in text for text in texts):
        return True
    if not match_tokens:
        return False
    return any(token in text for token in kw.split() for text in texts)


def _plain_text(text: str) -> str:
    """Reddit の HTML エスケープ（&amp; など）を戻す."""
    if "&" not in text:
        return text
    return BeautifulSoup(text, "html.parser").get_text()


def _deep_get(d: dict, *keys: str):
    """ネストされた dict から安全に値を取得する."""
    for key in keys:
        if not isinstance(d, dict):
            return None
        d = d.get(key)
    return d


# --- Reddit ---


def fetch_reddit_search(keyword: str) -> dict | None:
    """Reddit 検索 JSON を取得する.

    Returns:
        レスポンスの JSON。通信エラー・非 2xx・JSON 不正の場合は None。
    """
    url = REDDIT_SEARCH_URL_TEMPLATE.format(keyword=quote(keyword, safe=""))
    headers = {"User-Agent": USER_AGENT}

    try:
        resp = requests.get(url, headers=headers, timeout=REQUEST_TIMEOUT)
        resp.raise_for_status()
        return resp.json()
    except (requests.RequestException, ValueError) as e:
        logger.error("Reddit 検索失敗: keyword=%s, error=%s", keyword, e)
        return None


def parse_reddit_listing(data: dict) -> list[dict] | None:
    """検索 JSON から投稿データ（children[].data）のリストを取り出す.

    Returns:
        投稿 dict のリスト。構造が想定外なら None。
    """
    children = _deep_get(data, "data", "children")
    if not isinstance(children, list):
        return None
    posts = []
    for child in children:
        post = child.get("data") if isinstance(child, dict) else None
        if not isinstance(post, dict):
            return None
        posts.append(post)
    return posts


def _reddit_post_to_opportunity(
    post: dict, keyword: str, client_id: str, position: int
) -> Opportunity:
    discovered_at, ts = _timestamp()
    title = _plain_text(post.get("title") or "")
    selftext = _plain_text(post.get("selftext") or "")
    url = f"{REDDIT_BASE_URL}{post.get('permalink', '')}"

    if selftext:
        snippet = selftext[:200] + "..."
    else:
        snippet = (
            f"Posted in r/{post.get('subreddit', '')} • "
            f"{post.get('num_comments', 0)} comments • {post.get('score', 0)} upvotes"
        )

    return Opportunity(
        id=make_opportunity_id(client_id, keyword, "reddit", str(post.get("id", "")), ts),
        client_id=client_id,
        keyword=keyword,
        platform="reddit",
        url=url,
        title=title,
        snippet=snippet,
        intent=classify_intent(f"{title} {selftext}"),
        comment_url=url,
        ranking_position=position,
        discovered_at=discovered_at,
    )


def search_reddit(keyword: str, client_id: str) -> list[Opportunity]:
    """Reddit 公開検索から機会を取得する.

    広告・削除済み投稿はスキップするが、順位はレスポンス内の位置のまま。
    取得・パースに失敗した場合はフォールバックの固定データを返す。
    """
    data = fetch_reddit_search(keyword)
    posts = parse_reddit_listing(data) if data is not None else None
    if posts is None:
        logger.warning("Reddit 検索結果を使えないためフォールバック: keyword=%s", keyword)
        return reddit_fallback(keyword, client_id)

    opportunities: list[Opportunity] = []
    for i, post in enumerate(posts, start=1):
        if post.get("is_sponsored") or post.get("removed_by_category"):
            continue
        opportunities.append(_reddit_post_to_opportunity(post, keyword, client_id, i))

    logger.info("Reddit: keyword=%s → %d 件", keyword, len(opportunities))
    return opportunities


def reddit_fallback(keyword: str, client_id: str) -> list[Opportunity]:
    """Reddit の固定データ（先頭 2 件、キーワード絞り込みなし）."""
    opportunities = []
    for i, post in enumerate(
        fixtures.reddit_fallback_posts(keyword)[:REDDIT_FALLBACK_LIMIT], start=1
    ):
        discovered_at, ts = _timestamp()
        opportunities.append(Opportunity(
            id=make_opportunity_id(client_id, keyword, "reddit", post["id"], ts),
            client_id=client_id,
            keyword=keyword,
            platform="reddit",
            url=f"{REDDIT_BASE_URL}{post['permalink']}",
            title=post["title"],
            snippet=(
                f"{post['selftext'][:150]}... • Posted in r/{post['subreddit']} • "
                f"{post['num_comments']} comments • {post['score']} upvotes"
            ),
            ranking_position=i,
            discovered_at=discovered_at,
        ))
    return opportunities


# --- 固定データ ---


@dataclass(frozen=True)
class FixtureSource:
    """固定データを持つプラットフォームのアダプタ.

    Attributes:
        platform: プラットフォーム名
        candidates: keyword -> 候補レコードのリスト
        max_results: 返す最大件数
        suffix: snippet 末尾に付けるエンゲージメント表記（format 文字列）
        match_snippet: 本文も照合対象にするか
        match_tokens: キーワードの単語単位でも照合するか
        classify: 本文から intent を判定するか（レコードに intent があればそれを使う）
        link_comments: comment_url を設定するか
    """

    platform: str
    candidates: Callable[[str], list[dict]]
    max_results: int
    suffix: str
    match_snippet: bool = True
    match_tokens: bool = True
    classify: bool = False
    link_comments: bool = False

    def __call__(self, keyword: str, client_id: str) -> list[Opportunity]:
        relevant = [
            record for record in self.candidates(keyword)
            if matches_keyword(
                keyword,
                record["title"],
                record["snippet"] if self.match_snippet else "",
                match_tokens=self.match_tokens,
            )
        ]

        opportunities = []
        for i, record in enumerate(relevant[: self.max_results], start=1):
            discovered_at, ts = _timestamp()
            intent = record.get("intent")
            if intent is None and self.classify:
                intent = classify_intent(record["snippet"])
            opportunities.append(Opportunity(
                id=make_opportunity_id(client_id, keyword, self.platform, record["id"], ts),
                client_id=client_id,
                keyword=keyword,
                platform=self.platform,
                url=record["url"],
                title=record["title"],
                snippet=f"{record['snippet']} • {self.suffix.format(**record)}",
                intent=intent,
                comment_url=record["url"] if self.link_comments else None,
                ranking_position=i,
                discovered_at=discovered_at,
            ))
        return opportunities


search_quora = FixtureSource(
    platform="quora",
    candidates=fixtures.quora_questions,
    max_results=5,
    suffix="{answers} answers • {followers} followers",
    link_comments=True,
)

search_facebook = FixtureSource(
    platform="facebook",
    candidates=fixtures.facebook_posts,
    max_results=8,
    suffix="{likes} likes • {comments} comments • {group}",
    classify=True,
    link_comments=True,
)

search_linkedin = FixtureSource(
    platform="linkedin",
    candidates=fixtures.linkedin_posts,
    max_results=6,
    suffix="{likes} likes • {comments} comments • {author}",
    classify=True,
    link_comments=True,
)

search_twitter = FixtureSource(
    platform="twitter",
    candidates=fixtures.twitter_posts,
    max_results=5,
    suffix="{retweets} retweets • {likes} likes • {replies} replies • {author}",
    classify=True,
    link_comments=True,
)

search_stackoverflow = FixtureSource(
    platform="stackoverflow",
    candidates=fixtures.stackoverflow_questions,
    max_results=1,
    suffix="{votes} votes • {answers} answers",
    match_snippet=False,
)

search_hackernews = FixtureSource(
    platform="hackernews",
    candidates=fixtures.hackernews_stories,
    max_results=1,
    suffix="{points} points • {comments} comments",
    match_tokens=False,
)

search_producthunt = FixtureSource(
    platform="producthunt",
    candidates=fixtures.producthunt_posts,
    max_results=1,
    suffix="{upvotes} upvotes • {comments} comments",
    match_snippet=False,
)

search_indiehackers = FixtureSource(
    platform="indiehackers",
    candidates=fixtures.indiehackers_posts,
    max_results=1,
    suffix="{likes} likes • {comments} comments",
    match_tokens=False,
)
