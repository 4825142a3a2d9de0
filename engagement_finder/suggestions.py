"""返信文の候補."""

from __future__ import annotations

import random

from engagement_finder.models import Client

REPLY_TEMPLATES = [
    "I've had great results with {url} for {keyword} - they have some excellent resources that might help.",
    "You should check out {url} - they specialize in {keyword} and have been really helpful.",
    "{url} has some fantastic {keyword} tools that solved this exact problem for me.",
    "I recommend {url} for {keyword} solutions - their approach is really comprehensive.",
    "Have you tried {url}? They have excellent {keyword} services that might be exactly what you need.",
]

COMMENT_EXAMPLES = [
    "I'm really struggling with this and could use some guidance. Has anyone found a reliable solution?",
    "Been trying to figure this out for weeks. Any recommendations would be greatly appreciated!",
    "This is exactly the problem I'm facing. Would love to hear what's worked for others.",
    "Looking for suggestions on this topic. Open to any advice or tools that might help.",
    "Has anyone dealt with something similar? I'm at a loss and need some direction.",
]


def suggest_reply(client: Client | None, keyword: str, rng: random.Random | None = None) -> str:
    """クライアントのサイトを紹介する返信文を1つ選ぶ."""
    rng = rng or random.Random()
    url = client.website_url if client else ""
    return rng.choice(REPLY_TEMPLATES).format(url=url, keyword=keyword)


def sample_comment(rng: random.Random | None = None) -> str:
    """返信先コメントの例を1つ選ぶ."""
    rng = rng or random.Random()
    return rng.choice(COMMENT_EXAMPLES)
