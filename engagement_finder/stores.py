"""永続化モジュール.

キーごとに JSON ドキュメントを読み書きするリポジトリを2種類用意する。
  - LocalJsonRepository: DATA_DIR 配下に {key}.json を置く
  - SupabaseRepository: Supabase の documents テーブル
    （key text primary key, value jsonb。save は key での upsert）

その上にクライアント・機会・セッションのストアを載せる。どのストアも
全件を読み込み、変更後に全件を書き戻す。
"""

from __future__ import annotations

import json
import logging
import time
from dataclasses import replace
from datetime import datetime, timezone
from pathlib import Path

from supabase import create_client

from engagement_finder import config
from engagement_finder.models import Client, Opportunity, User
from engagement_finder.processor import mark_visited

logger = logging.getLogger(__name__)

CLIENTS_KEY = "kef_clients"
OPPORTUNITIES_KEY = "kef_opportunities"
USER_KEY = "kef_user"


class ConfigError(RuntimeError):
    """ストレージ設定が不足している."""


class LocalJsonRepository:
    """ローカルファイルに JSON を保存するリポジトリ."""

    def __init__(self, data_dir: Path | str = config.DATA_DIR):
        self.data_dir = Path(data_dir)

    def _path(self, key: str) -> Path:
        return self.data_dir / f"{key}.json"

    def load(self, key: str):
        path = self._path(key)
        if not path.exists():
            return None
        return json.loads(path.read_text(encoding="utf-8"))

    def save(self, key: str, value) -> None:
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self._path(key).write_text(
            json.dumps(value, ensure_ascii=False, indent=2), encoding="utf-8"
        )

    def delete(self, key: str) -> None:
        self._path(key).unlink(missing_ok=True)


class SupabaseRepository:
    """Supabase の documents テーブルに JSON を保存するリポジトリ.

    テーブルは SUPABASE_SCHEMA スキーマに配置する。
    """

    def __init__(self, url: str = config.SUPABASE_URL, key: str = config.SUPABASE_SECRET_KEY,
                 schema: str = config.SUPABASE_SCHEMA):
        if not url or not key:
            raise ConfigError("SUPABASE_URL と SUPABASE_SECRET_KEY を設定してください")
        self._client = create_client(url, key)
        self._schema = schema

    def _table(self, name: str = "documents"):
        return self._client.schema(self._schema).table(name)

    def load(self, key: str):
        resp = self._table().select("value").eq("key", key).execute()
        if not resp.data:
            return None
        return resp.data[0]["value"]

    def save(self, key: str, value) -> None:
        self._table().upsert({"key": key, "value": value}).execute()
        logger.debug("documents に保存: key=%s", key)

    def delete(self, key: str) -> None:
        self._table().delete().eq("key", key).execute()


def get_repository(backend: str = config.STORAGE_BACKEND):
    """設定に応じたリポジトリを返す."""
    if backend == "local":
        return LocalJsonRepository()
    if backend == "supabase":
        return SupabaseRepository()
    raise ConfigError(f"未対応のストレージ: {backend}")


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class ClientStore:
    """クライアントの保存・更新・削除."""

    def __init__(self, repository):
        self.repository = repository

    def list(self) -> list[Client]:
        return [Client.from_dict(d) for d in self.repository.load(CLIENTS_KEY) or []]

    def _save(self, clients: list[Client]) -> None:
        self.repository.save(CLIENTS_KEY, [c.to_dict() for c in clients])

    def get(self, client_id: str) -> Client | None:
        return next((c for c in self.list() if c.id == client_id), None)

    def create(self, name: str, website_url: str, keywords: list[str] | None = None) -> Client:
        """クライアントを追加する。ID はミリ秒タイムスタンプ."""
        clients = self.list()
        existing = {c.id for c in clients}
        stamp = int(time.time() * 1000)
        while str(stamp) in existing:
            stamp += 1

        now = _now()
        client = Client(
            id=str(stamp),
            name=name,
            website_url=website_url,
            keywords=_unique(keywords or []),
            created_at=now,
            updated_at=now,
        )
        self._save([*clients, client])
        logger.info("クライアント追加: id=%s, name=%s", client.id, name)
        return client

    def update(self, client_id: str, **changes) -> Client | None:
        """指定項目を上書きする。ID が見つからなければ何もしない.

        キーは属性名（website_url）と保存形式の名前（websiteUrl）のどちらでもよい。
        id と作成・更新日時は無視する。それ以外の未知のキーは ValueError。
        """
        fields = _client_changes(changes)
        clients = self.list()
        for i, client in enumerate(clients):
            if client.id == client_id:
                clients[i] = replace(client, **fields, updated_at=_now())
                self._save(clients)
                return clients[i]
        return None

    def delete(self, client_id: str) -> None:
        clients = self.list()
        remaining = [c for c in clients if c.id != client_id]
        if len(remaining) != len(clients):
            self._save(remaining)
            logger.info("クライアント削除: id=%s", client_id)

    def add_keyword(self, client_id: str, keyword: str) -> Client | None:
        """キーワードを追加する。空文字・登録済みのキーワードは無視."""
        client = self.get(client_id)
        keyword = keyword.strip()
        if client is None or not keyword or keyword in client.keywords:
            return client
        return self.update(client_id, keywords=[*client.keywords, keyword])

    def remove_keyword(self, client_id: str, keyword: str) -> Client | None:
        client = self.get(client_id)
        if client is None or keyword not in client.keywords:
            return client
        return self.update(client_id, keywords=[k for k in client.keywords if k != keyword])


def _unique(keywords: list[str]) -> list[str]:
    result: list[str] = []
    for kw in keywords:
        kw = kw.strip()
        if kw and kw not in result:
            result.append(kw)
    return result


class OpportunityStore:
    """検索結果の保存。検索のたびに全件置き換える."""

    def __init__(self, repository):
        self.repository = repository

    def list(self) -> list[Opportunity]:
        return [Opportunity.from_dict(d) for d in self.repository.load(OPPORTUNITIES_KEY) or []]

    def replace_all(self, opportunities: list[Opportunity]) -> None:
        self.repository.save(OPPORTUNITIES_KEY, [o.to_dict() for o in opportunities])
        logger.info("機会を保存: %d 件", len(opportunities))

    def set_visited(self, opportunity_id: str) -> None:
        """訪問済みにする。ID が見つからなければ何もしない."""
        opportunities = self.list()
        if not any(o.id == opportunity_id for o in opportunities):
            return
        self.replace_all(mark_visited(opportunities, opportunity_id))


class SessionStore:
    """ログインセッション（ユーザーレコード）の保存."""

    def __init__(self, repository):
        self.repository = repository

    def load(self) -> User | None:
        data = self.repository.load(USER_KEY)
        return User.from_dict(data) if data else None

    def save(self, user: User) -> None:
        self.repository.save(USER_KEY, user.to_dict())

    def clear(self) -> None:
        self.repository.delete(USER_KEY)


_EDITABLE_FIELDS = {
    "name": "name",
    "website_url": "website_url",
    "websiteUrl": "website_url",
    "keywords": "keywords",
}
_FIXED_FIELDS = {"id", "created_at", "createdAt", "updated_at", "updatedAt"}


def _client_changes(changes: dict) -> dict:
    fields = {}
    for key, value in changes.items():
        if key in _FIXED_FIELDS:
            continue
        if key not in _EDITABLE_FIELDS:
            raise ValueError(f"更新できない項目です: {key}")
        fields[_EDITABLE_FIELDS[key]] = value
    if "keywords" in fields:
        fields["keywords"] = _unique(fields["keywords"])
    return fields
