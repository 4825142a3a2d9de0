"""設定モジュール — 環境変数・定数定義."""

import os
from pathlib import Path

from dotenv import load_dotenv

# .env はプロジェクトルートに配置
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
load_dotenv(_PROJECT_ROOT / ".env")

# --- ストレージ ---
STORAGE_BACKEND: str = os.environ.get("KEF_STORAGE_BACKEND", "local")  # "local" or "supabase"
DATA_DIR = Path(os.environ.get("KEF_DATA_DIR", _PROJECT_ROOT / "data"))

# --- Supabase ---
SUPABASE_URL: str = os.environ.get("SUPABASE_URL", "")
SUPABASE_SECRET_KEY: str = os.environ.get("SUPABASE_SECRET_KEY", "")
SUPABASE_SCHEMA: str = os.environ.get("KEF_SUPABASE_SCHEMA", "engagement_finder")

# --- Reddit 検索 ---
REDDIT_SEARCH_URL_TEMPLATE = (
    "https://www.reddit.com/search.json?q={keyword}&sort=relevance&limit=50&type=link"
)
REDDIT_BASE_URL = "https://www.reddit.com"
USER_AGENT = "KeywordEngagementFinder/1.0"

# --- リクエスト設定 ---
REQUEST_TIMEOUT = int(os.environ.get("KEF_REQUEST_TIMEOUT", "15"))  # 秒

# --- アダプタ登録 ---
# "social": reddit, quora, facebook, linkedin, twitter
# "community": reddit, quora, stackoverflow, hackernews, producthunt, indiehackers
ADAPTER_REGISTRY: str = os.environ.get("KEF_ADAPTER_REGISTRY", "social")

# --- ログイン ---
ADMIN_EMAIL: str = os.environ.get("KEF_ADMIN_EMAIL", "FHM")
ADMIN_PASSWORD: str = os.environ.get("KEF_ADMIN_PASSWORD", "TechnicalSEO!")
ADMIN_NAME: str = os.environ.get("KEF_ADMIN_NAME", "FHM")

# --- ログ ---
LOG_DIR = Path(os.environ.get("KEF_LOG_DIR", _PROJECT_ROOT / "logs"))
