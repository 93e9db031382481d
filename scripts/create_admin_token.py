import sys
import os

# Add project root to sys.path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from portfolio.core.config import settings
from portfolio.core.security import create_access_token

if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: python scripts/create_admin_token.py <subject> [expires_minutes]")
        sys.exit(1)

    subject = sys.argv[1]
    minutes = int(sys.argv[2]) if len(sys.argv) > 2 else None
    token = create_access_token(subject, role=settings.ADMIN_ROLE, expires_minutes=minutes)
    print(f"Authorization: Bearer {token}")
