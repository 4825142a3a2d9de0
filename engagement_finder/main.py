"""キーワード機会検索 — メインエントリーポイント.

search の処理フロー:
  1. ストアから全クライアントを取得
  2. クライアント × キーワード × アダプタで機会を収集
  3. 保存済みの機会を今回の結果で置き換える
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from datetime import datetime

from engagement_finder import config
from engagement_finder.auth import AuthGate, can_manage_clients
from engagement_finder.collector import REGISTRIES, collect, get_adapters
from engagement_finder.export import write_csv
from engagement_finder.models import FilterCriteria
from engagement_finder.processor import (
    SORT_KEYS,
    filter_opportunities,
    sort_opportunities,
    summarize,
)
from engagement_finder.stores import ClientStore, OpportunityStore, SessionStore, get_repository
from engagement_finder.suggestions import sample_comment, suggest_reply

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """ロギングの初期設定."""
    config.LOG_DIR.mkdir(parents=True, exist_ok=True)
    log_file = config.LOG_DIR / f"engagement_finder_{datetime.now().strftime('%Y%m%d')}.log"
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout),
            logging.FileHandler(log_file, encoding="utf-8"),
        ],
    )


def run_search(clients: ClientStore, opportunities: OpportunityStore, registry: str) -> int:
    """検索を実行して保存する。失敗時は保存済みデータを変更しない."""
    logger.info("=== 機会検索 開始 ===")
    start_time = time.time()

    client_list = clients.list()
    if not client_list:
        logger.warning("登録済みのクライアントがありません。終了します。")
        return 0

    try:
        results = collect(client_list, get_adapters(registry))
    except Exception:
        logger.exception("検索に失敗しました。保存済みの機会は変更しません。")
        return 1

    opportunities.replace_all(results)

    elapsed = time.time() - start_time
    logger.info("=== 機会検索 完了 ===")
    logger.info("クライアント: %d 件, 機会: %d 件, 所要時間: %.1f 秒",
                len(client_list), len(results), elapsed)
    return 0


def _criteria(args: argparse.Namespace) -> FilterCriteria:
    visited = {"yes": True, "no": False}.get(args.visited or "")
    return FilterCriteria(
        client_id=args.client,
        platform=args.platform,
        keyword=args.keyword,
        visited=visited,
    )


def _view(args, clients: ClientStore, opportunities: OpportunityStore):
    client_list = clients.list()
    filtered = filter_opportunities(opportunities.list(), _criteria(args))
    return client_list, sort_opportunities(filtered, args.sort, args.direction, client_list)


def _add_view_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--client", help="クライアント ID")
    parser.add_argument("--platform")
    parser.add_argument("--keyword", help="キーワード部分一致")
    parser.add_argument("--visited", choices=["yes", "no"])
    parser.add_argument("--sort", choices=SORT_KEYS, default="discoveredAt")
    parser.add_argument("--direction", choices=["asc", "desc"], default="desc")


def print_rows(rows, client_list, suggest: bool = False, rng: random.Random | None = None) -> None:
    """機会を1行ずつ表示する。suggest のときは返信文の候補も添える."""
    rng = rng or random.Random()
    by_id = {c.id: c for c in client_list}
    for opp in rows:
        status = "visited" if opp.visited else "new"
        print(f"{opp.id}\t{opp.platform}\t#{opp.ranking_position}\t"
              f"{opp.intent or '-'}\t{status}\t{opp.title}\t{opp.url}")
        if opp.comment_url:
            print(f"    comment: {opp.comment_url}")
        if suggest:
            print(f"    comment example: {sample_comment(rng)}")
            print(f"    suggested reply: {suggest_reply(by_id.get(opp.client_id), opp.keyword, rng)}")


def manage_clients(args: argparse.Namespace, clients: ClientStore, gate: AuthGate) -> int:
    """クライアントの追加・編集・削除（admin のみ）."""
    if not can_manage_clients(gate.current_user()):
        print("admin でログインしてください", file=sys.stderr)
        return 1

    if args.command == "add-client":
        client = clients.create(args.name, args.website_url, args.keywords)
        print(client.id)
    elif args.command == "update-client":
        changes = {}
        if args.name is not None:
            changes["name"] = args.name
        if args.website_url is not None:
            changes["website_url"] = args.website_url
        clients.update(args.client_id, **changes)
    elif args.command == "add-keyword":
        clients.add_keyword(args.client_id, args.keyword)
    elif args.command == "remove-keyword":
        clients.remove_keyword(args.client_id, args.keyword)
    else:
        clients.delete(args.client_id)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="engagement-finder")
    parser.add_argument("-v", "--verbose", action="store_true")
    sub = parser.add_subparsers(dest="command", required=True)

    search = sub.add_parser("search", help="全クライアントのキーワードで機会を検索")
    search.add_argument("--registry", default=config.ADAPTER_REGISTRY,
                        choices=list(REGISTRIES))

    listing = sub.add_parser("list", help="保存済みの機会を表示")
    _add_view_arguments(listing)
    listing.add_argument("--suggest", action="store_true",
                         help="返信文の候補と返信先コメントの例も表示")

    export = sub.add_parser("export", help="機会を CSV に出力")
    export.add_argument("--output", help="出力先（省略時は日付入りファイル名）")
    _add_view_arguments(export)

    visit = sub.add_parser("visit", help="機会を訪問済みにする")
    visit.add_argument("opportunity_id")

    sub.add_parser("stats", help="集計を表示")
    sub.add_parser("clients", help="クライアント一覧")

    add = sub.add_parser("add-client", help="クライアントを追加（admin のみ）")
    add.add_argument("name")
    add.add_argument("website_url")
    add.add_argument("keywords", nargs="*")

    update = sub.add_parser("update-client", help="クライアントを編集（admin のみ）")
    update.add_argument("client_id")
    update.add_argument("--name")
    update.add_argument("--website-url")

    for command in ("add-keyword", "remove-keyword"):
        keyword = sub.add_parser(command, help="キーワードを追加・削除（admin のみ）")
        keyword.add_argument("client_id")
        keyword.add_argument("keyword")

    delete = sub.add_parser("delete-client", help="クライアントを削除（admin のみ）")
    delete.add_argument("client_id")

    login = sub.add_parser("login")
    login.add_argument("email")
    login.add_argument("password")
    sub.add_parser("logout")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    repository = get_repository()
    clients = ClientStore(repository)
    opportunities = OpportunityStore(repository)
    gate = AuthGate(SessionStore(repository))

    if args.command == "search":
        return run_search(clients, opportunities, args.registry)

    if args.command == "list":
        client_list, rows = _view(args, clients, opportunities)
        print_rows(rows, client_list, args.suggest)
        return 0

    if args.command == "export":
        client_list, rows = _view(args, clients, opportunities)
        print(write_csv(rows, client_list, args.output))
        return 0

    if args.command == "visit":
        opportunities.set_visited(args.opportunity_id)
        return 0

    if args.command == "stats":
        stats = summarize(clients.list(), opportunities.list())
        print(f"Total Clients: {stats['total_clients']}")
        print(f"Keywords Monitored: {stats['total_keywords']}")
        print(f"Opportunities Found: {stats['total_opportunities']}")
        print(f"Avg. Ranking Position: {stats['average_ranking_position']}")
        for platform, count in stats["platform_counts"].items():
            print(f"  {platform}: {count}")
        print("Recent Opportunities:")
        for opp in stats["recent"]:
            print(f"  {opp.discovered_at}\t{opp.platform}\t{opp.title}\t{opp.url}")
        return 0

    if args.command == "clients":
        for client in clients.list():
            print(f"{client.id}\t{client.name}\t{client.website_url}\t{', '.join(client.keywords)}")
        return 0

    if args.command == "login":
        if gate.login(args.email, args.password):
            return 0
        print("ログインに失敗しました", file=sys.stderr)
        return 1

    if args.command == "logout":
        gate.logout()
        return 0

    return manage_clients(args, clients, gate)


if __name__ == "__main__":
    sys.exit(main())
