import json

import redis.asyncio as redis
from async_lru import alru_cache
from cachetools import TTLCache
from loguru import logger
from pydantic import ValidationError

from app.core.config import settings
from app.core.security import redact_email
from app.models.user import CommitCount, Project, User


class UserStore:
    """Redis-backed store of member records. Also serves the profile page's data collections."""

    KEY_PREFIX = settings.REDIS_USER_KEY

    def __init__(self, client: redis.Redis | None = None) -> None:
        self._client = client
        # Negative cache so probes for unknown profiles do not hit Redis each time
        self._missing_users: TTLCache = TTLCache(maxsize=10000, ttl=settings.MISSING_USER_TTL_SECONDS)
        if client is None and not settings.REDIS_URL:
            logger.warning("REDIS_URL is not set. User lookups will fail until a Redis instance is configured.")

    async def _get_client(self) -> redis.Redis:
        if self._client is None:
            logger.info("Creating shared Redis client")
            self._client = redis.from_url(
                settings.REDIS_URL,
                decode_responses=True,
                encoding="utf-8",
                socket_connect_timeout=5,
                socket_timeout=5,
                max_connections=settings.REDIS_MAX_CONNECTIONS,
                health_check_interval=30,
                socket_keepalive=True,
            )
        return self._client

    async def close(self) -> None:
        """Close the shared Redis client (call on shutdown)."""
        if self._client is None:
            return
        try:
            logger.info("Closing shared Redis client")
            await self._client.aclose()
        except Exception as e:
            logger.debug(f"Silent failure closing redis client: {e}")
        finally:
            self._client = None

    def _format_key(self, user_id: str) -> str:
        return f"{self.KEY_PREFIX}{user_id}"

    def _invalidate(self, user_id: str) -> None:
        try:
            self.get_user.cache_invalidate(user_id)
        except KeyError:
            pass
        self._missing_users.pop(user_id, None)

    async def store_user(self, user: User) -> str:
        client = await self._get_client()
        await client.set(self._format_key(user.id), user.model_dump_json())
        self._invalidate(user.id)
        logger.debug(f"Stored user {user.id} ({redact_email(user.email)})")
        return user.id

    @alru_cache(maxsize=2000, ttl=settings.USER_CACHE_TTL_SECONDS)
    async def get_user(self, user_id: str) -> User | None:
        if user_id in self._missing_users:
            logger.debug(f"[REDIS] Negative cache hit for missing user {user_id}")
            return None

        logger.debug(f"[REDIS] Cache miss. Fetching user {user_id}")
        client = await self._get_client()
        raw = await client.get(self._format_key(user_id))
        if not raw:
            self._missing_users[user_id] = True
            return None

        try:
            return User.model_validate(json.loads(raw))
        except (json.JSONDecodeError, ValidationError) as e:
            logger.warning(f"Discarding unreadable record for user {user_id}: {e}")
            return None

    async def delete_user(self, user_id: str) -> None:
        client = await self._get_client()
        await client.delete(self._format_key(user_id))
        self._invalidate(user_id)

    async def count_users(self) -> int:
        """Count members by scanning keys with the configured prefix."""
        try:
            client = await self._get_client()
            total = 0
            async for _ in client.scan_iter(match=f"{self.KEY_PREFIX}*", count=500):
                total += 1
            return total
        except (redis.RedisError, OSError) as exc:
            logger.warning(f"Failed to count users; Redis unavailable: {exc}")
            return 0

    # Profile data collections

    async def commit_counts(self, user: User) -> list[CommitCount]:
        return list(user.commit_counts)

    async def following_projects(self, user: User) -> list[Project]:
        return list(user.following_projects)

    async def following_projects_count(self, user: User) -> int:
        return len(user.following_projects)

    async def skills(self, user: User) -> list[str]:
        return list(user.skill_list)


user_store = UserStore()
