"""データモデル定義."""

from __future__ import annotations

from dataclasses import dataclass, field

PLATFORMS = (
    "reddit",
    "quora",
    "facebook",
    "linkedin",
    "twitter",
    "stackoverflow",
    "hackernews",
    "producthunt",
    "indiehackers",
)

INTENTS = ("positive", "negative", "neutral", "question")

ROLES = ("admin", "user")


@dataclass
class Client:
    """監視対象のクライアント."""

    id: str
    name: str
    website_url: str
    keywords: list[str] = field(default_factory=list)
    created_at: str = ""  # ISO 8601
    updated_at: str = ""  # ISO 8601

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "websiteUrl": self.website_url,
            "keywords": list(self.keywords),
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Client:
        return cls(
            id=str(data["id"]),
            name=data.get("name", ""),
            website_url=data.get("websiteUrl", ""),
            keywords=list(data.get("keywords") or []),
            created_at=data.get("createdAt", ""),
            updated_at=data.get("updatedAt", ""),
        )


@dataclass
class Opportunity:
    """キーワードに対して見つかった投稿・スレッド 1 件."""

    id: str
    client_id: str
    keyword: str
    platform: str  # PLATFORMS のいずれか
    url: str  # 重複排除キー
    title: str
    snippet: str
    ranking_position: int  # アダプタ内の順位（1始まり）
    discovered_at: str  # ISO 8601
    intent: str | None = None  # INTENTS のいずれか。アダプタによっては None
    comment_url: str | None = None
    visited: bool = False

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "clientId": self.client_id,
            "keyword": self.keyword,
            "platform": self.platform,
            "url": self.url,
            "title": self.title,
            "snippet": self.snippet,
            "intent": self.intent,
            "commentUrl": self.comment_url,
            "rankingPosition": self.ranking_position,
            "discoveredAt": self.discovered_at,
            "visited": self.visited,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Opportunity:
        return cls(
            id=data["id"],
            client_id=data["clientId"],
            keyword=data["keyword"],
            platform=data["platform"],
            url=data["url"],
            title=data.get("title", ""),
            snippet=data.get("snippet", ""),
            intent=data.get("intent"),
            comment_url=data.get("commentUrl"),
            ranking_position=int(data["rankingPosition"]),
            discovered_at=data["discoveredAt"],
            visited=bool(data.get("visited", False)),
        )


@dataclass
class User:
    """ログインユーザー."""

    id: str
    email: str
    name: str
    role: str  # "admin" or "user"

    def to_dict(self) -> dict:
        return {"id": self.id, "email": self.email, "name": self.name, "role": self.role}

    @classmethod
    def from_dict(cls, data: dict) -> User:
        return cls(
            id=str(data["id"]),
            email=data["email"],
            name=data.get("name", ""),
            role=data.get("role", "user"),
        )


@dataclass
class FilterCriteria:
    """一覧表示の絞り込み条件。None / 空文字の項目は条件なし."""

    client_id: str | None = None
    platform: str | None = None
    keyword: str | None = None  # 部分一致（大文字小文字を区別しない）
    visited: bool | None = None
