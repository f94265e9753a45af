import asyncio
import sys

from dotenv import load_dotenv

# Load .env before the settings object is built
load_dotenv()

from prompthub.models import Base, init_db, close_db  # noqa: E402
from prompthub.config import settings  # noqa: E402

async def main(reset: bool = False):
    if reset:
        from prompthub.models.base import engine
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
        print("Dropped existing tables")

    await init_db()
    for name in Base.metadata.tables:
        print(f" Ready: {name}")
    await close_db()

if __name__ == "__main__":
    print(f"Database: {settings.sqlalchemy_url.split('@')[-1]}")
    asyncio.run(main(reset="--reset" in sys.argv))
