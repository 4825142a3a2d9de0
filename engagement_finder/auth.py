"""ログイン管理モジュール.

認証情報は設定の1組だけ。ログイン中のユーザーはセッションストアに保存する。
"""

from __future__ import annotations

import hmac
import logging

from engagement_finder import config
from engagement_finder.models import User
from engagement_finder.stores import SessionStore

logger = logging.getLogger(__name__)

ADMIN_USER = User(id="1", email=config.ADMIN_EMAIL, name=config.ADMIN_NAME, role="admin")


class AuthGate:
    """ログイン・ログアウトとロール判定."""

    def __init__(self, sessions: SessionStore, user: User = ADMIN_USER,
                 password: str = config.ADMIN_PASSWORD):
        self.sessions = sessions
        self._user = user
        self._password = password

    def login(self, email: str, password: str) -> bool:
        if email == self._user.email and hmac.compare_digest(
            password.encode("utf-8"), self._password.encode("utf-8")
        ):
            self.sessions.save(self._user)
            logger.info("ログイン: %s", email)
            return True
        logger.warning("ログイン失敗: %s", email)
        return False

    def logout(self) -> None:
        self.sessions.clear()

    def current_user(self) -> User | None:
        return self.sessions.load()


def can_manage_clients(user: User | None) -> bool:
    """クライアントの追加・編集・削除ができるのは admin のみ."""
    return user is not None and user.role == "admin"
