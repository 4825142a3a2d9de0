"""processor モジュールのユニットテスト."""

from engagement_finder.models import Client, FilterCriteria, Opportunity
from engagement_finder.processor import (
    classify_intent,
    dedupe,
    filter_opportunities,
    mark_visited,
    sort_opportunities,
    summarize,
)


def _opp(id, url=None, **kwargs) -> Opportunity:
    data = {
        "client_id": "c1",
        "keyword": "seo tools",
        "platform": "reddit",
        "title": f"title {id}",
        "snippet": "",
        "ranking_position": 1,
        "discovered_at": "2026-10-01T09:00:00+00:00",
    }
    data.update(kwargs)
    return Opportunity(id=id, url=url or f"https://example.com/{id}", **data)


class TestClassifyIntent:
    """classify_intent のテスト."""

    def test_question_beats_negative(self):
        assert classify_intent("how do I fix this? it's terrible") == "question"

    def test_positive_and_negative_is_neutral(self):
        assert classify_intent("I love it but it's terrible") == "neutral"

    def test_question_mark_only(self):
        assert classify_intent("Anyone tried Ahrefs?") == "question"

    def test_negative(self):
        assert classify_intent("The worst product ever") == "negative"

    def test_positive(self):
        assert classify_intent("Absolutely superb") == "positive"

    def test_case_insensitive(self):
        assert classify_intent("GREAT SERVICE") == "positive"

    def test_neutral(self):
        assert classify_intent("Just a plain update") == "neutral"

    def test_substring_match(self):
        """単語境界は見ない（"show" は "how" を含む）."""
        assert classify_intent("Show HN: a new dashboard") == "question"


class TestDedupe:
    """dedupe のテスト."""

    def test_first_seen_wins(self):
        a = _opp("a", url="https://x/1")
        b = _opp("b", url="https://x/2")
        c = _opp("c", url="https://x/1")
        result = dedupe([a, b, c])

        assert [o.id for o in result] == ["a", "b"]

    def test_idempotent(self):
        items = [_opp("a", url="u1"), _opp("b", url="u1"), _opp("c", url="u2")]
        once = dedupe(items)
        assert dedupe(once) == once

    def test_urls_unique(self):
        items = [_opp(str(i), url=f"u{i % 3}") for i in range(10)]
        urls = [o.url for o in dedupe(items)]
        assert urls == ["u0", "u1", "u2"]

    def test_empty(self):
        assert dedupe([]) == []


class TestFilterOpportunities:
    """filter_opportunities のテスト."""

    def setup_method(self):
        self.items = [
            _opp("1", platform="reddit", visited=True),
            _opp("2", platform="reddit", visited=False),
            _opp("3", platform="quora", visited=True),
            _opp("4", platform="twitter", client_id="c2", keyword="Web Design"),
        ]

    def test_empty_criteria_returns_all(self):
        assert filter_opportunities(self.items, FilterCriteria()) == self.items

    def test_and_composition(self):
        result = filter_opportunities(
            self.items, FilterCriteria(platform="reddit", visited=True)
        )
        assert [o.id for o in result] == ["1"]

    def test_visited_false(self):
        result = filter_opportunities(self.items, FilterCriteria(visited=False))
        assert [o.id for o in result] == ["2", "4"]

    def test_keyword_substring_case_insensitive(self):
        result = filter_opportunities(self.items, FilterCriteria(keyword="design"))
        assert [o.id for o in result] == ["4"]

    def test_client(self):
        result = filter_opportunities(self.items, FilterCriteria(client_id="c2"))
        assert [o.id for o in result] == ["4"]

    def test_empty_strings_ignored(self):
        result = filter_opportunities(
            self.items, FilterCriteria(client_id="", platform="", keyword="")
        )
        assert result == self.items


class TestSortOpportunities:
    """sort_opportunities のテスト."""

    def test_platform_stable(self):
        items = [
            _opp("1", platform="reddit"),
            _opp("2", platform="quora"),
            _opp("3", platform="reddit"),
            _opp("4", platform="quora"),
        ]
        result = sort_opportunities(items, "platform", "asc")
        assert [o.id for o in result] == ["2", "4", "1", "3"]

    def test_desc_stable(self):
        items = [
            _opp("1", platform="reddit"),
            _opp("2", platform="quora"),
            _opp("3", platform="reddit"),
        ]
        result = sort_opportunities(items, "platform", "desc")
        assert [o.id for o in result] == ["1", "3", "2"]

    def test_default_discovered_at_desc(self):
        items = [
            _opp("old", discovered_at="2026-10-01T09:00:00+00:00"),
            _opp("new", discovered_at="2026-10-03T09:00:00Z"),
            _opp("mid", discovered_at="2026-10-02T09:00:00+00:00"),
        ]
        result = sort_opportunities(items)
        assert [o.id for o in result] == ["new", "mid", "old"]

    def test_discovered_at_compares_instants(self):
        items = [
            _opp("a", discovered_at="2026-10-01T10:00:00+02:00"),  # 08:00 UTC
            _opp("b", discovered_at="2026-10-01T09:00:00+00:00"),
        ]
        result = sort_opportunities(items, "discoveredAt", "asc")
        assert [o.id for o in result] == ["a", "b"]

    def test_ranking_position(self):
        items = [_opp("1", ranking_position=3), _opp("2", ranking_position=1)]
        result = sort_opportunities(items, "rankingPosition", "asc")
        assert [o.id for o in result] == ["2", "1"]

    def test_keyword_case_insensitive(self):
        items = [_opp("1", keyword="banana"), _opp("2", keyword="Apple")]
        result = sort_opportunities(items, "keyword", "asc")
        assert [o.id for o in result] == ["2", "1"]

    def test_client_name_lookup(self):
        clients = [
            Client(id="c1", name="zeta", website_url=""),
            Client(id="c2", name="Alpha", website_url=""),
        ]
        items = [_opp("1", client_id="c1"), _opp("2", client_id="c2"), _opp("3", client_id="gone")]
        result = sort_opportunities(items, "client", "asc", clients)
        assert [o.id for o in result] == ["3", "2", "1"]

    def test_does_not_mutate_input(self):
        items = [_opp("1", ranking_position=2), _opp("2", ranking_position=1)]
        sort_opportunities(items, "rankingPosition", "asc")
        assert [o.id for o in items] == ["1", "2"]


class TestMarkVisited:
    """mark_visited のテスト."""

    def test_marks_matching(self):
        items = [_opp("1"), _opp("2")]
        result = mark_visited(items, "2")
        assert [o.visited for o in result] == [False, True]
        assert items[1].visited is False

    def test_unknown_id(self):
        items = [_opp("1")]
        assert mark_visited(items, "nope") == items

    def test_never_clears(self):
        items = [_opp("1", visited=True)]
        assert mark_visited(items, "1")[0].visited is True


class TestSummarize:
    """summarize のテスト."""

    def test_counts(self):
        clients = [
            Client(id="c1", name="Acme", website_url="", keywords=["a", "b"]),
            Client(id="c2", name="Beta", website_url="", keywords=["c"]),
        ]
        items = [
            _opp("1", platform="reddit", ranking_position=1),
            _opp("2", platform="quora", ranking_position=2),
        ]
        stats = summarize(clients, items)

        assert stats["total_clients"] == 2
        assert stats["total_keywords"] == 3
        assert stats["total_opportunities"] == 2
        assert stats["average_ranking_position"] == 2  # 1.5 は切り上げ
        assert stats["platform_counts"]["reddit"] == 1
        assert stats["platform_counts"]["twitter"] == 0

    def test_empty(self):
        stats = summarize([], [])
        assert stats["average_ranking_position"] == 0
        assert stats["recent"] == []

    def test_recent_limit(self):
        items = [_opp(str(i), discovered_at=f"2026-10-0{i}T00:00:00+00:00") for i in range(1, 8)]
        recent = summarize([], items)["recent"]
        assert [o.id for o in recent] == ["7", "6", "5", "4", "3"]
