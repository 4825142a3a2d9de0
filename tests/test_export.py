"""export / suggestions モジュールのテスト."""

import random
from datetime import date, datetime

from engagement_finder.export import HEADERS, _format_date, export_filename, to_csv, write_csv
from engagement_finder.models import Client, Opportunity
from engagement_finder.suggestions import (
    COMMENT_EXAMPLES,
    REPLY_TEMPLATES,
    sample_comment,
    suggest_reply,
)

DISCOVERED_AT = "2026-10-18T12:00:00+00:00"
ACME = Client(id="c1", name="Acme", website_url="https://acme.example", keywords=["seo"])


def _opp(**kwargs) -> Opportunity:
    data = {
        "id": "1",
        "client_id": "c1",
        "keyword": "seo",
        "platform": "quora",
        "url": "https://www.quora.com/q",
        "title": 'Best "SEO" tools, ranked',
        "snippet": "s",
        "ranking_position": 2,
        "discovered_at": DISCOVERED_AT,
        "intent": "question",
    }
    data.update(kwargs)
    return Opportunity(**data)


def _local_date(value: str) -> str:
    d = datetime.fromisoformat(value).astimezone()
    return f"{d.month}/{d.day}/{d.year}"


class TestToCsv:
    """to_csv のテスト."""

    def test_header_only(self):
        assert to_csv([], []) == ",".join(f'"{h}"' for h in HEADERS)

    def test_row(self):
        lines = to_csv([_opp()], [ACME]).split("\n")

        assert len(lines) == 2
        assert lines[1] == (
            '"Acme","seo","quora","https://www.quora.com/q",'
            '"Best ""SEO"" tools, ranked","question","2",'
            f'"{_local_date(DISCOVERED_AT)}","No"'
        )

    def test_unknown_client_and_missing_intent(self):
        line = to_csv([_opp(client_id="gone", intent=None, visited=True)], [ACME]).split("\n")[1]

        assert line.startswith('"Unknown",')
        assert ',"","2",' in line
        assert line.endswith('"Yes"')


class TestFormatDate:
    """_format_date のテスト."""

    def test_four_digit_year(self):
        month, day, year = _format_date(DISCOVERED_AT).split("/")

        assert year == "2026"
        assert month == "10"
        assert day in {"18", "19"}

    def test_no_zero_padding(self):
        assert _format_date("2026-03-05T12:00:00Z").startswith("3/")


class TestWriteCsv:
    def test_filename(self):
        assert export_filename(date(2026, 10, 18)) == "keyword-opportunities-2026-10-18.csv"

    def test_write(self, tmp_path):
        path = write_csv([_opp()], [ACME], tmp_path / "out.csv")

        assert path.read_text(encoding="utf-8").startswith('"Client Name"')


class TestSuggestions:
    """suggestions のテスト."""

    def test_reply_uses_injected_rng(self):
        first = suggest_reply(ACME, "seo", random.Random(1))
        second = suggest_reply(ACME, "seo", random.Random(1))

        assert first == second
        assert "https://acme.example" in first
        assert first in [t.format(url=ACME.website_url, keyword="seo") for t in REPLY_TEMPLATES]

    def test_comment(self):
        assert sample_comment(random.Random(3)) in COMMENT_EXAMPLES
