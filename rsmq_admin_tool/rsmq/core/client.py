"""
Redis client wrapper with error handling.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

from collections.abc import Callable, Sequence
from typing import Any

import redis
from redis.backoff import NoBackoff
from redis.client import Pipeline
from redis.exceptions import (
    AuthenticationError,
    RedisError,
    ResponseError,
    WatchError,
)
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import TimeoutError as RedisTimeoutError
from redis.retry import Retry

from ..constants import DEFAULT_DB, DEFAULT_HOST, DEFAULT_NAMESPACE, DEFAULT_PORT, DEFAULT_TIMEOUT
from ..exceptions import TransactionConflictError, TransportError
from ..logging_config import get_logger
from ..utils import queue_hash_key, queue_zset_key, queues_key, to_str

logger = get_logger(__name__)


class RedisClient:
    """Redis client wrapper scoped to one RSMQ namespace."""

    def __init__(
        self,
        host: str = DEFAULT_HOST,
        port: int = DEFAULT_PORT,
        db: int = DEFAULT_DB,
        password: str | None = None,
        namespace: str = DEFAULT_NAMESPACE,
        timeout: float | None = DEFAULT_TIMEOUT,
        url: str | None = None,
        connection_pool: redis.ConnectionPool | None = None,
        redis_client: redis.Redis | None = None,
    ):
        """
        Initialize Redis client.

        The byte stream to the server is established by, in order of
        precedence: an existing `redis_client`, a caller-built
        `connection_pool` (e.g. one whose connection class dials through a
        tunnel), a `url`, or host/port/db/password.

        Commands are never retried: a timeout or dropped connection surfaces
        as TransportError and retry policy is left to the caller.

        Args:
            host: Redis host
            port: Redis port
            db: Redis database number
            password: Redis password (optional)
            namespace: Key prefix for every key touched (default: 'rsmq:')
            timeout: Socket connect/read timeout in seconds
            url: Redis URL, e.g. redis://:pass@host:6379/0 (optional)
            connection_pool: Pre-built connection pool (optional)
            redis_client: Pre-built redis client (optional)
        """
        self.namespace = namespace or DEFAULT_NAMESPACE

        if redis_client is not None:
            self.redis = redis_client
            self.endpoint = "injected client"
            self.owns_connection = False
        elif connection_pool is not None:
            self.redis = redis.Redis(connection_pool=connection_pool)
            self.endpoint = "custom connection pool"
            self.owns_connection = True
        elif url:
            self.redis = redis.Redis.from_url(
                url,
                socket_timeout=timeout,
                socket_connect_timeout=timeout,
                retry=Retry(NoBackoff(), 0),
            )
            self.endpoint = url
            self.owns_connection = True
        else:
            self.redis = redis.Redis(
                host=host,
                port=port,
                db=db,
                password=password,
                socket_timeout=timeout,
                socket_connect_timeout=timeout,
                retry=Retry(NoBackoff(), 0),
            )
            self.endpoint = f"{host}:{port}/{db}"
            self.owns_connection = True

    # Keys

    @property
    def queues_key(self) -> str:
        return queues_key(self.namespace)

    def queue_hash_key(self, queue_name: str) -> str:
        return queue_hash_key(self.namespace, queue_name)

    def queue_zset_key(self, queue_name: str) -> str:
        return queue_zset_key(self.namespace, queue_name)

    # Reads

    def ping(self) -> bool:
        """
        Check connectivity.

        Returns:
            True if the server answered PING

        Raises:
            TransportError: If the server cannot be reached
        """
        try:
            return bool(self.redis.ping())
        except RedisError as e:
            self._handle_error(e)
            raise  # For type checker

    def info(self, section: str = "server") -> dict[str, Any]:
        """Return an INFO section."""
        try:
            return self.redis.info(section)  # type: ignore[return-value]
        except RedisError as e:
            self._handle_error(e)
            raise  # For type checker

    def smembers(self, key: str) -> set[str]:
        """Return the members of a set as strings."""
        try:
            return {to_str(m) for m in self.redis.smembers(key)}  # type: ignore[union-attr]
        except RedisError as e:
            self._handle_error(e)
            raise  # For type checker

    def exists(self, key: str) -> bool:
        """Return True if the key holds a value (a hash with at least one field)."""
        try:
            return bool(self.redis.exists(key))
        except RedisError as e:
            self._handle_error(e)
            raise  # For type checker

    def hmget(self, key: str, fields: Sequence[str]) -> list[Any]:
        """Return the raw values of hash fields; missing fields are None."""
        if not fields:
            return []
        try:
            return self.redis.hmget(key, list(fields))  # type: ignore[return-value]
        except RedisError as e:
            self._handle_error(e)
            raise  # For type checker

    def zcard(self, key: str) -> int:
        """Return the cardinality of a sorted set."""
        try:
            return int(self.redis.zcard(key))  # type: ignore[arg-type]
        except RedisError as e:
            self._handle_error(e)
            raise  # For type checker

    def zcount(self, key: str, min_score: str | int, max_score: str | int) -> int:
        """Count sorted set members with scores in [min_score, max_score]."""
        try:
            return int(self.redis.zcount(key, min_score, max_score))  # type: ignore[arg-type]
        except RedisError as e:
            self._handle_error(e)
            raise  # For type checker

    def zrange(self, key: str) -> list[str]:
        """Return every member of a sorted set, ordered by ascending score."""
        try:
            return [to_str(m) for m in self.redis.zrange(key, 0, -1)]  # type: ignore[union-attr]
        except RedisError as e:
            self._handle_error(e)
            raise  # For type checker

    def zrange_with_scores(self, key: str) -> list[tuple[str, float]]:
        """Return every (member, score) pair of a sorted set, ascending by score."""
        try:
            pairs = self.redis.zrange(key, 0, -1, withscores=True)
            return [(to_str(m), float(s)) for m, s in pairs]  # type: ignore[union-attr]
        except RedisError as e:
            self._handle_error(e)
            raise  # For type checker

    # Writes

    def execute_transaction(
        self,
        build: Callable[[Pipeline], None],
        watch: Sequence[str] = (),
        precondition: Callable[[Pipeline], None] | None = None,
        attempts: int = 1,
    ) -> list[Any]:
        """
        Execute queued commands atomically with MULTI/EXEC.

        When `watch` keys are given they are WATCHed before `precondition`
        runs (in immediate mode, so it can read and raise), and EXEC aborts if
        any of them changes in between. An aborted EXEC is re-run from the
        WATCH, precondition included, until `attempts` are used up.

        Args:
            build: Callback queuing commands on the pipeline
            watch: Keys to WATCH before the precondition (optional)
            precondition: Callback that reads state and raises to abort (optional)
            attempts: How many times to run the transaction before giving up

        Returns:
            Replies of the queued commands, in order

        Raises:
            TransactionConflictError: If a watched key changed before every EXEC
            TransportError: For connectivity or protocol errors
        """
        for attempt in range(1, attempts + 1):
            try:
                with self.redis.pipeline(transaction=True) as pipe:
                    if watch:
                        pipe.watch(*watch)
                    if precondition is not None:
                        precondition(pipe)
                    pipe.multi()
                    build(pipe)
                    logger.debug(f"Executing transaction with {len(pipe)} command(s)")
                    return pipe.execute()
            except WatchError:
                logger.debug(f"Watched key(s) changed, attempt {attempt} of {attempts}")
            except RedisError as e:
                self._handle_error(e)
                raise  # For type checker

        raise TransactionConflictError(
            f"Watched key(s) {', '.join(watch)} changed during transaction"
        )

    def close(self) -> None:
        """Release connections opened by this client. An injected client is left open."""
        if self.owns_connection:
            self.redis.close()

    def _handle_error(self, error: RedisError) -> None:
        """
        Convert redis errors to rsmq exceptions.

        Args:
            error: Error raised by redis-py

        Raises:
            TransportError: Always, with a message naming the failure class
        """
        if isinstance(error, AuthenticationError):
            raise TransportError(f"Authentication failed for {self.endpoint}: {error}")
        elif isinstance(error, RedisTimeoutError):
            raise TransportError(f"Timed out talking to {self.endpoint}: {error}")
        elif isinstance(error, RedisConnectionError):
            raise TransportError(f"Cannot connect to {self.endpoint}: {error}")
        elif isinstance(error, ResponseError):
            raise TransportError(f"Redis rejected command: {error}")
        else:
            raise TransportError(f"Redis error: {error}")
