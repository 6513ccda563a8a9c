"""A small HTTP request builder with hooks around client, request and response."""

from __future__ import annotations

import inspect
from typing import Any, Callable, Optional, Union

import httpx

from wdtools.ctx import Ctx

Body = Union[bytes, str]
ClientHook = Callable[[Ctx, dict[str, Any]], httpx.AsyncClient]
RequestHook = Callable[[Ctx, httpx.Request], Any]
ResponseHook = Callable[[Ctx, httpx.Response], Any]


async def _default_response_hook(_: Ctx, response: httpx.Response) -> httpx.Response:
    return response


async def _resolve(value: Any) -> Any:
    if inspect.isawaitable(value):
        return await value
    return value


class Http:
    """Describes one request; hooks may replace how it is built and decoded.

    * the client hook gets the context and the client options and returns an
      ``httpx.AsyncClient``;
    * the request hook gets the context and the built ``httpx.Request`` and returns
      the request to send;
    * the response hook gets the context and the ``httpx.Response`` and returns the
      result of the call. By default the response itself is the result.
    """

    def __init__(self, method: str, url: Union[str, httpx.URL]) -> None:
        self.method = method.upper()
        self.url = httpx.URL(url)
        self.headers: Optional[dict[str, str]] = None
        self.content: Optional[Body] = None
        self.hook_ctx = Ctx()
        self._client_build_hook: Optional[ClientHook] = None
        self._request_build_hook: Optional[RequestHook] = None
        self._response_hook: ResponseHook = _default_response_hook

    def _clone(self) -> "Http":
        """A copy sharing hooks and context, without the body."""
        other = Http(self.method, self.url)
        other.headers = dict(self.headers) if self.headers is not None else None
        other.hook_ctx = self.hook_ctx
        other._client_build_hook = self._client_build_hook
        other._request_build_hook = self._request_build_hook
        other._response_hook = self._response_hook
        return other

    def header(self, key: str, value: str) -> "Http":
        """Set a request header."""
        if self.headers is None:
            self.headers = {}
        self.headers[key] = value
        return self

    def body(self, body: Body) -> "Http":
        """Set the request body."""
        self.content = body
        return self

    def hook_client_build(self, func: ClientHook) -> "Http":
        self._client_build_hook = func
        return self

    def hook_request_build(self, func: RequestHook) -> "Http":
        self._request_build_hook = func
        return self

    def hook_response(self, func: ResponseHook) -> "Http":
        self._response_hook = func
        return self

    async def send(self, body: Body, expected: Optional[type] = None) -> Any:
        """Send a copy of this request carrying ``body``."""
        return await self._clone().body(body).into_send(expected)

    async def send_no_body(self, expected: Optional[type] = None) -> Any:
        """Send a copy of this request without a body."""
        return await self._clone().into_send(expected)

    async def into_send(self, expected: Optional[type] = None) -> Any:
        """Send the request and return what the response hook produced.

        When ``expected`` is given and the result is not an instance of it,
        TypeError is raised.
        """
        if self._client_build_hook is None:
            client = httpx.AsyncClient()
        else:
            client = self._client_build_hook(self.hook_ctx, {})

        async with client:
            request = client.build_request(
                self.method, self.url, headers=self.headers, content=self.content
            )
            if self._request_build_hook is not None:
                request = await _resolve(self._request_build_hook(self.hook_ctx, request))
            response = await client.send(request)
            result = await _resolve(self._response_hook(self.hook_ctx, response))

        if expected is not None and not isinstance(result, expected):
            raise TypeError(
                f"decoding error: expect type[{expected.__name__}], "
                f"but find type[{type(result).__name__}]"
            )
        return result