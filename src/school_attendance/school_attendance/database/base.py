from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional, Sequence


@dataclass(frozen=True)
class ExecResult:
    lastrowid: int
    rowcount: int


class Database(ABC):
    """Storage interface shared by every repository.

    SQL is written with `?` placeholders; implementations translate to their
    driver's paramstyle. A connection opened by `transaction()` is tracked per
    thread, so repository calls made inside the block join it. Calls made
    outside any transaction run on a short-lived connection and commit
    immediately.
    """

    dialect: str = ""

    def __init__(self) -> None:
        self._local = threading.local()

    @abstractmethod
    def connect(self):
        raise NotImplementedError

    @abstractmethod
    def list_tables(self) -> List[str]:
        raise NotImplementedError

    def adapt_sql(self, sql: str) -> str:
        return sql

    def open_cursor(self, conn):
        return conn.cursor()

    def in_transaction(self) -> bool:
        return getattr(self._local, "conn", None) is not None

    @contextmanager
    def transaction(self) -> Iterator[None]:
        if self.in_transaction():
            # Nested blocks join the outer transaction.
            yield
            return

        conn = self.connect()
        self._local.conn = conn
        try:
            yield
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            self._local.conn = None
            conn.close()

    @contextmanager
    def cursor(self):
        conn = getattr(self._local, "conn", None)
        if conn is None:
            with self.transaction():
                with self.cursor() as cur:
                    yield cur
            return

        cur = self.open_cursor(conn)
        try:
            yield cur
        finally:
            cur.close()

    def execute(self, sql: str, params: Sequence[Any] = ()) -> ExecResult:
        with self.cursor() as cur:
            cur.execute(self.adapt_sql(sql), tuple(params))
            return ExecResult(lastrowid=int(cur.lastrowid or 0), rowcount=int(cur.rowcount or 0))

    def fetchone(self, sql: str, params: Sequence[Any] = ()) -> Optional[Dict[str, Any]]:
        with self.cursor() as cur:
            cur.execute(self.adapt_sql(sql), tuple(params))
            row = cur.fetchone()
            return dict(row) if row else None

    def fetchall(self, sql: str, params: Sequence[Any] = ()) -> List[Dict[str, Any]]:
        with self.cursor() as cur:
            cur.execute(self.adapt_sql(sql), tuple(params))
            return [dict(r) for r in cur.fetchall() or []]
