import asyncio
import sys
import os

# Add project root to sys.path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from portfolio.db.session import async_session_maker
from portfolio.services.comment_service import CommentService
from portfolio.services.comment_store import CommentStore

async def list_pending():
    async with async_session_maker() as session:
        comments = await CommentService(CommentStore(session)).pending()
        if not comments:
            print("No comments awaiting approval.")
        else:
            print("Pending comments:")
            for c in comments:
                reply = f" reply to #{c.parent_id}" if c.parent_id else ""
                preview = c.content[:60] + "..." if len(c.content) > 60 else c.content
                print(f"- #{c.id} post {c.blog_post_id}{reply} | {c.name} <{c.email}> | {preview}")

if __name__ == "__main__":
    asyncio.run(list_pending())
