"""固定データ（API を持たないプラットフォーム用の候補レコード）.

Facebook / LinkedIn / Twitter と Reddit フォールバックはキーワードを
タイトル・本文に埋め込むため関数で生成する。
"""

from __future__ import annotations

import time

QUORA_QUESTIONS = [
    {
        "id": "what-is-best-seo-strategy",
        "title": "What is the best SEO strategy for small businesses in 2024?",
        "url": "https://www.quora.com/What-is-the-best-SEO-strategy-for-small-businesses-in-2024",
        "snippet": (
            "I run a small local business and want to improve my online visibility. "
            "What SEO strategies actually work for small businesses with limited budgets? "
            "Looking for practical advice that I can implement myself."
        ),
        "answers": 23,
        "followers": 156,
        "intent": "question",
    },
    {
        "id": "digital-marketing-tools",
        "title": "What are the most effective digital marketing tools for startups?",
        "url": "https://www.quora.com/What-are-the-most-effective-digital-marketing-tools-for-startups",
        "snippet": (
            "Starting a new business and need to establish an online presence. "
            "What digital marketing tools would you recommend for someone just getting started? "
            "Budget is tight so looking for cost-effective solutions."
        ),
        "answers": 34,
        "followers": 289,
        "intent": "question",
    },
    {
        "id": "web-design-trends",
        "title": "What web design trends should I follow in 2024?",
        "url": "https://www.quora.com/What-web-design-trends-should-I-follow-in-2024",
        "snippet": (
            "Redesigning my company website and want to make sure it looks modern and "
            "professional. What design trends are worth following this year? What should I avoid?"
        ),
        "answers": 18,
        "followers": 203,
        "intent": "question",
    },
    {
        "id": "content-marketing-strategy",
        "title": "How do I create a content marketing strategy that actually works?",
        "url": "https://www.quora.com/How-do-I-create-a-content-marketing-strategy-that-actually-works",
        "snippet": (
            "Been creating content for months but not seeing much engagement or leads. "
            "What am I missing? How do successful companies approach content marketing?"
        ),
        "answers": 27,
        "followers": 178,
        "intent": "question",
    },
    {
        "id": "social-media-marketing",
        "title": "Which social media platforms should I focus on for B2B marketing?",
        "url": "https://www.quora.com/Which-social-media-platforms-should-I-focus-on-for-B2B-marketing",
        "snippet": (
            "Running a B2B company and trying to figure out where to spend my social media "
            "efforts. LinkedIn seems obvious, but what about other platforms? "
            "Where do you see the best ROI?"
        ),
        "answers": 19,
        "followers": 145,
        "intent": "question",
    },
    {
        "id": "email-marketing-tips",
        "title": "What are the best email marketing practices for small businesses?",
        "url": "https://www.quora.com/What-are-the-best-email-marketing-practices-for-small-businesses",
        "snippet": (
            "Want to start email marketing but not sure where to begin. What platforms work "
            "best? How often should I send emails? What content gets the best response rates?"
        ),
        "answers": 31,
        "followers": 267,
        "intent": "question",
    },
]

STACKOVERFLOW_QUESTIONS = [
    {
        "id": "react-performance-optimization",
        "title": "How to optimize React app performance for large datasets?",
        "url": "https://stackoverflow.com/questions/react-performance-optimization-large-datasets",
        "snippet": (
            "My React application is becoming slow when handling large amounts of data. "
            "What are the best practices for optimization? Looking for practical solutions."
        ),
        "votes": 45,
        "answers": 8,
    },
    {
        "id": "javascript-seo-best-practices",
        "title": "SEO best practices for JavaScript-heavy websites",
        "url": "https://stackoverflow.com/questions/seo-best-practices-javascript-websites",
        "snippet": (
            "Building a SPA and concerned about SEO. What are the current best practices "
            "for making JavaScript applications search engine friendly?"
        ),
        "votes": 67,
        "answers": 12,
    },
    {
        "id": "api-design-patterns",
        "title": "What are the best API design patterns for scalable web applications?",
        "url": "https://stackoverflow.com/questions/api-design-patterns-scalable-web-applications",
        "snippet": (
            "Designing APIs for a growing application. What patterns and practices should "
            "I follow to ensure scalability and maintainability?"
        ),
        "votes": 89,
        "answers": 15,
    },
]

HACKERNEWS_STORIES = [
    {
        "id": "startup-marketing-strategies",
        "title": "Ask HN: What marketing strategies worked for your startup?",
        "url": "https://news.ycombinator.com/item?id=startup-marketing-strategies",
        "snippet": (
            "Launching a B2B SaaS product and struggling with customer acquisition. "
            "What marketing channels have been most effective for other founders here?"
        ),
        "points": 234,
        "comments": 89,
    },
    {
        "id": "web-development-tools",
        "title": "Show HN: New web development tool for faster prototyping",
        "url": "https://news.ycombinator.com/item?id=web-development-tools",
        "snippet": (
            "Built a tool to help developers create prototypes faster. "
            "Would love feedback from the community on features and usability."
        ),
        "points": 156,
        "comments": 45,
    },
    {
        "id": "seo-algorithm-changes",
        "title": "Google algorithm update affecting small business websites",
        "url": "https://news.ycombinator.com/item?id=seo-algorithm-changes",
        "snippet": (
            "Recent Google updates seem to be hurting small business visibility. "
            "Has anyone else noticed changes in their search rankings?"
        ),
        "points": 178,
        "comments": 67,
    },
]

PRODUCTHUNT_POSTS = [
    {
        "id": "marketing-automation-tool",
        "title": "Marketing Automation Tool for Small Businesses",
        "url": "https://www.producthunt.com/posts/marketing-automation-tool",
        "snippet": (
            "Launched our marketing automation platform designed specifically for small "
            "businesses. Would love feedback from the community!"
        ),
        "upvotes": 234,
        "comments": 23,
    },
    {
        "id": "seo-analytics-dashboard",
        "title": "SEO Analytics Dashboard - Track Your Rankings",
        "url": "https://www.producthunt.com/posts/seo-analytics-dashboard",
        "snippet": (
            "New SEO tool that provides comprehensive ranking analytics and competitor "
            "insights. Free tier available for small businesses."
        ),
        "upvotes": 189,
        "comments": 34,
    },
]

INDIEHACKERS_POSTS = [
    {
        "id": "startup-growth-strategies",
        "title": "What growth strategies worked for your first 1000 users?",
        "url": "https://www.indiehackers.com/post/startup-growth-strategies",
        "snippet": (
            "Struggling to get traction for my SaaS product. What marketing channels and "
            "strategies helped you reach your first milestone?"
        ),
        "likes": 67,
        "comments": 23,
    },
    {
        "id": "content-marketing-indie",
        "title": "Content marketing for indie makers - what actually works?",
        "url": "https://www.indiehackers.com/post/content-marketing-indie",
        "snippet": (
            "Been creating content for months but not seeing much traffic or conversions. "
            "What content strategies have worked for other indie hackers?"
        ),
        "likes": 89,
        "comments": 34,
    },
]


def quora_questions(keyword: str) -> list[dict]:
    return QUORA_QUESTIONS


def stackoverflow_questions(keyword: str) -> list[dict]:
    return STACKOVERFLOW_QUESTIONS


def hackernews_stories(keyword: str) -> list[dict]:
    return HACKERNEWS_STORIES


def producthunt_posts(keyword: str) -> list[dict]:
    return PRODUCTHUNT_POSTS


def indiehackers_posts(keyword: str) -> list[dict]:
    return INDIEHACKERS_POSTS


def facebook_posts(keyword: str) -> list[dict]:
    """Facebook グループ投稿の候補."""
    return [
        {
            "id": "small-business-marketing-group",
            "title": f"Looking for advice on {keyword} for my small business",
            "url": "https://www.facebook.com/groups/smallbusinessmarketing/posts/123456789",
            "snippet": (
                f"Hi everyone! I'm struggling with {keyword} for my small business. "
                "Has anyone had success with this? Would love to hear your experiences "
                "and any recommendations you might have."
            ),
            "likes": 23,
            "comments": 15,
            "group": "Small Business Marketing",
        },
        {
            "id": "entrepreneurs-network",
            "title": f"Best {keyword} strategies for startups?",
            "url": "https://www.facebook.com/groups/entrepreneursnetwork/posts/987654321",
            "snippet": (
                f"Starting a new venture and need help with {keyword}. What strategies have "
                "worked best for other entrepreneurs here? Looking for cost-effective solutions."
            ),
            "likes": 34,
            "comments": 28,
            "group": "Entrepreneurs Network",
        },
        {
            "id": "digital-marketing-professionals",
            "title": f"{keyword} trends for 2024 - what are your thoughts?",
            "url": "https://www.facebook.com/groups/digitalmarketingpros/posts/456789123",
            "snippet": (
                f"Seeing some interesting developments in {keyword} lately. "
                "What trends are you noticing? How are you adapting your strategies?"
            ),
            "likes": 45,
            "comments": 32,
            "group": "Digital Marketing Professionals",
        },
    ]


def linkedin_posts(keyword: str) -> list[dict]:
    """LinkedIn 投稿の候補."""
    return [
        {
            "id": "b2b-marketing-discussion",
            "title": f"Seeking recommendations for {keyword} in B2B space",
            "url": "https://www.linkedin.com/posts/activity-123456789",
            "snippet": (
                f"Looking for insights on {keyword} specifically for B2B companies. "
                "What approaches have worked well for your organisation? Would appreciate "
                "any recommendations or case studies you can share."
            ),
            "likes": 67,
            "comments": 23,
            "author": "Marketing Director at TechCorp",
        },
        {
            "id": "startup-founder-question",
            "title": f"How do you approach {keyword} as a startup founder?",
            "url": "https://www.linkedin.com/posts/activity-987654321",
            "snippet": (
                f"As a first-time founder, I'm trying to navigate {keyword} for our growing "
                "startup. What resources or strategies would you recommend? Looking for "
                "practical advice from experienced entrepreneurs."
            ),
            "likes": 89,
            "comments": 34,
            "author": "Founder & CEO at InnovateCo",
        },
        {
            "id": "industry-professional-insight",
            "title": f"{keyword} best practices - what's working in 2024?",
            "url": "https://www.linkedin.com/posts/activity-456789123",
            "snippet": (
                f"Interested in hearing from fellow professionals about current {keyword} "
                "best practices. What strategies are delivering the best results for your "
                "teams this year?"
            ),
            "likes": 45,
            "comments": 19,
            "author": "Senior Marketing Manager",
        },
    ]


def twitter_posts(keyword: str) -> list[dict]:
    """Twitter 投稿の候補."""
    return [
        {
            "id": "startup-founder-tweet",
            "title": f"Anyone have experience with {keyword}? Looking for advice \U0001f9f5",
            "url": "https://twitter.com/startupfounder/status/123456789",
            "snippet": (
                f"Building our startup and need help with {keyword}. What tools or strategies "
                "have worked for other founders? Thread with your recommendations below! "
                "#startup #entrepreneur"
            ),
            "retweets": 23,
            "likes": 67,
            "replies": 15,
            "author": "@startupfounder",
        },
        {
            "id": "marketing-professional-tweet",
            "title": f"What's your go-to {keyword} strategy in 2024?",
            "url": "https://twitter.com/marketingpro/status/987654321",
            "snippet": (
                f"Curious about what {keyword} strategies are working best this year. "
                "Drop your top tips below! Always learning from this amazing community. "
                "#marketing #business"
            ),
            "retweets": 34,
            "likes": 89,
            "replies": 28,
            "author": "@marketingpro",
        },
        {
            "id": "small-business-owner-tweet",
            "title": f"Small business owners: how do you handle {keyword}?",
            "url": "https://twitter.com/smallbizowner/status/456789123",
            "snippet": (
                f"Running a small business and struggling with {keyword}. What solutions have "
                "worked for you? Budget-friendly options preferred! #smallbusiness #help"
            ),
            "retweets": 12,
            "likes": 45,
            "replies": 23,
            "author": "@smallbizowner",
        },
    ]


def reddit_fallback_posts(keyword: str) -> list[dict]:
    """Reddit 検索失敗時に使う投稿."""
    slug = "_".join(keyword.split())
    now = time.time()
    return [
        {
            "id": "entrepreneur_seo_help",
            "subreddit": "entrepreneur",
            "title": f"How do I improve my {keyword} strategy for my startup?",
            "selftext": (
                f"I've been working on my startup for 6 months and struggling with {keyword}. "
                "I've tried a few different approaches but haven't seen the results I was "
                "hoping for. What strategies have worked for you? Any tools or services you'd "
                "recommend? Looking for practical advice from people who've been through this."
            ),
            "permalink": f"/r/entrepreneur/comments/18xyz123/how_do_i_improve_my_{slug}_strategy/",
            "num_comments": 47,
            "score": 156,
            "created_utc": now - 86400 * 2,
        },
        {
            "id": "smallbusiness_tools",
            "subreddit": "smallbusiness",
            "title": f"Best {keyword} tools for small businesses in 2024?",
            "selftext": (
                f"Running a small business and need help with {keyword}. Budget is limited so "
                "looking for cost-effective solutions. What tools or services have you found "
                "most valuable? Preferably something that doesn't require a huge learning curve."
            ),
            "permalink": f"/r/smallbusiness/comments/18abc456/best_{slug}_tools_for_small/",
            "num_comments": 23,
            "score": 89,
            "created_utc": now - 86400 * 5,
        },
        {
            "id": "marketing_mistakes",
            "subreddit": "marketing",
            "title": f"{keyword} mistakes to avoid - learned the hard way",
            "selftext": (
                f"Made some costly mistakes with {keyword} over the past year. Thought I'd share "
                "what I learned so others can avoid the same pitfalls. Also curious what "
                "mistakes others have made and how you recovered from them."
            ),
            "permalink": f"/r/marketing/comments/18def789/{slug}_mistakes_to_avoid_learned/",
            "num_comments": 34,
            "score": 203,
            "created_utc": now - 86400 * 1,
        },
    ]
