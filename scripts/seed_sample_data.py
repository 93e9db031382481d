"""Fill an empty database with sample portfolio content.

Run: python scripts/seed_sample_data.py
Skips every table that already has rows.
"""
import asyncio
import sys
import os

# Add project root to sys.path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sqlalchemy import func, select

from portfolio.db.session import Base, async_session_maker, engine
from portfolio.models import BlogPost, CodeSample, GithubRepo, PortfolioApp
from portfolio.schemas.profile import ProfileUpdate
from portfolio.services.profile_service import get_profile, save_profile

SAMPLE_APPS = [
    {
        "title": "Task Manager Pro",
        "description": "A productivity app for managing daily tasks with reminders and categories.",
        "category": "Productivity",
        "icon_url": "/uploads/apps/task-manager.png",
        "screenshot_urls": [],
        "featured": True,
        "play_store_url": "https://play.google.com/store/apps/details?id=com.example.taskmanager",
        "rating": "4.7",
        "downloads": "100K+",
    },
    {
        "title": "Weather Now",
        "description": "Hourly and weekly forecasts with severe weather alerts.",
        "category": "Weather",
        "icon_url": "/uploads/apps/weather-now.png",
        "screenshot_urls": [],
        "featured": False,
        "rating": "4.5",
        "downloads": "50K+",
    },
]

SAMPLE_REPOS = [
    {
        "name": "android-mvvm-starter",
        "description": "Starter template for Android apps using MVVM, Hilt and Room.",
        "stars": 342,
        "forks": 87,
        "url": "https://github.com/example/android-mvvm-starter",
        "tags": ["kotlin", "android", "mvvm"],
    },
    {
        "name": "compose-ui-kit",
        "description": "Reusable Jetpack Compose components.",
        "stars": 128,
        "forks": 21,
        "url": "https://github.com/example/compose-ui-kit",
        "tags": ["kotlin", "jetpack-compose"],
    },
]

SAMPLE_POSTS = [
    {
        "title": "Getting Started with Jetpack Compose",
        "slug": "getting-started-with-jetpack-compose",
        "excerpt": "A practical introduction to building UIs declaratively on Android.",
        "content": "Jetpack Compose is Android's modern toolkit for building native UI...",
        "cover_image_url": "/uploads/blog/compose.png",
        "published_at": "2026-03-15",
        "author": "Portfolio Owner",
        "is_featured": True,
        "tags": ["android", "compose"],
    },
    {
        "title": "Structuring Offline-First Apps",
        "slug": "structuring-offline-first-apps",
        "excerpt": "Repositories, caches and sync strategies for apps that work without a network.",
        "content": "Offline-first means the local database is the source of truth...",
        "cover_image_url": "/uploads/blog/offline-first.png",
        "published_at": "2026-05-02",
        "author": "Portfolio Owner",
        "is_featured": False,
        "tags": ["architecture"],
    },
]

SAMPLE_CODE = [
    {
        "title": "Kotlin coroutine retry helper",
        "language": "kotlin",
        "code": (
            "suspend fun <T> retry(times: Int, block: suspend () -> T): T {\n"
            "    repeat(times - 1) { runCatching { return block() } }\n"
            "    return block()\n"
            "}"
        ),
    },
]

SAMPLE_PROFILE = {
    "name": "Portfolio Owner",
    "title": "Mobile & Backend Developer",
    "bio": "I build Android apps and the services behind them.",
    "email": "hello@example.com",
    "location": "Remote",
    "experience": [
        {
            "company": "Example Labs",
            "position": "Senior Android Developer",
            "start_date": "2022-01-01",
            "description": "Led the mobile team.",
        }
    ],
    "education": [
        {
            "school": "Example University",
            "degree": "BSc",
            "field": "Computer Science",
            "graduation_date": "2018-06-30",
        }
    ],
    "skills": ["Kotlin", "Python", "PostgreSQL"],
    "social_links": [{"platform": "github", "url": "https://github.com/example"}],
}


async def _seed_table(session, model, rows) -> int:
    count = (await session.execute(select(func.count()).select_from(model))).scalar() or 0
    if count:
        print(f"- {model.__tablename__}: {count} rows present, skipped")
        return 0
    session.add_all(model(**row) for row in rows)
    print(f"- {model.__tablename__}: {len(rows)} rows added")
    return len(rows)


async def seed(create_tables: bool = False):
    if create_tables:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    async with async_session_maker() as session:
        await _seed_table(session, PortfolioApp, SAMPLE_APPS)
        await _seed_table(session, GithubRepo, SAMPLE_REPOS)
        await _seed_table(session, BlogPost, SAMPLE_POSTS)
        await _seed_table(session, CodeSample, SAMPLE_CODE)
        if await get_profile(session) is None:
            await save_profile(session, ProfileUpdate(**SAMPLE_PROFILE))
            print("- profiles: sample profile added")
        await session.commit()
    print("Sample data ready.")


if __name__ == "__main__":
    asyncio.run(seed(create_tables="--create-tables" in sys.argv))
