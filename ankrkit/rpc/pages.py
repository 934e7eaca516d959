"""Forward-only cursor over a paginated RPC method."""

from __future__ import annotations

import asyncio
from typing import AsyncIterator, Generic, TypeVar

from ankrkit.models.base import PaginatedRequest, PaginatedResponse
from ankrkit.rpc.executor import RequestExecutor
from ankrkit.utils.exceptions import PagesExhaustedError, RequestCancelledError

PageT = TypeVar("PageT", bound=PaginatedResponse)


class PageCursor(Generic[PageT]):
    """
    Pages of one paginated call, fetched on demand.

    State machine:
    - has more (initial): next_page() fetches with the stored page token.
    - exhausted (terminal): reached when a page comes back without a next
      token; next_page() then raises PagesExhaustedError.

    A failed fetch leaves the token and state untouched, so calling
    next_page() again retries the same page. Concurrent next_page() calls are
    serialized by a per-cursor lock; has_next() never waits on it.
    """

    def __init__(
        self,
        executor: RequestExecutor,
        method: str,
        request: PaginatedRequest,
        page_type: type[PageT],
    ):
        self._executor = executor
        self._method = method
        self._request = request.model_copy(deep=True)
        self._page_type = page_type
        self._has_next = True
        self._lock = asyncio.Lock()

    @property
    def method(self) -> str:
        return self._method

    @property
    def page_token(self) -> str | None:
        """Token the next fetch will send (None for the first page)."""
        return self._request.page_token

    def has_next(self) -> bool:
        return self._has_next

    async def next_page(self, timeout: float | None = None) -> PageT:
        """
        Fetch the page for the stored token.

        ``timeout`` covers the wait for a concurrent fetch to finish as well as
        the fetch itself; when it fires RequestCancelledError is raised and the
        cursor is left as it was.
        """
        if timeout is None:
            return await self._fetch_next()
        try:
            return await asyncio.wait_for(self._fetch_next(), timeout=timeout)
        except asyncio.TimeoutError as exc:
            raise RequestCancelledError(self._method, timeout) from exc

    async def _fetch_next(self) -> PageT:
        async with self._lock:
            if not self._has_next:
                raise PagesExhaustedError(self._method)
            page = await self._executor.call(self._method, self._request, self._page_type)
            if page.next_page_token:
                self._request = self._request.model_copy(update={"page_token": page.next_page_token})
            else:
                self._has_next = False
            return page

    def __aiter__(self) -> AsyncIterator[PageT]:
        return self._iter_pages()

    async def _iter_pages(self) -> AsyncIterator[PageT]:
        while self._has_next:
            try:
                yield await self.next_page()
            except PagesExhaustedError:
                # another consumer took the last page
                return

    def __repr__(self) -> str:
        state = "has_next" if self._has_next else "exhausted"
        return f"PageCursor(method={self._method!r}, state={state})"
