"""Builder - separate the construction of a complex object from its representation."""
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from patternbook.application.decorators import pattern_example
from patternbook.domain.base.exceptions import ValidationError
from patternbook.domain.catalog import PatternCategory

_METHODS = ("GET", "POST", "PUT", "PATCH", "DELETE")


class HttpRequest(BaseModel):
    """Immutable product."""
    model_config = ConfigDict(frozen=True)

    method: str
    url: str
    headers: Dict[str, str] = Field(default_factory=dict)
    query: Tuple[Tuple[str, str], ...] = ()
    body: Optional[str] = None
    timeout: float = 30.0

    def full_url(self) -> str:
        if not self.query:
            return self.url
        params = "&".join(f"{k}={v}" for k, v in self.query)
        return f"{self.url}?{params}"


class HttpRequestBuilder:
    """Fluent builder; every step returns the builder itself."""

    def __init__(self):
        self.reset()

    def reset(self) -> "HttpRequestBuilder":
        self._method = "GET"
        self._url: Optional[str] = None
        self._headers: Dict[str, str] = {}
        self._query: List[Tuple[str, str]] = []
        self._body: Optional[str] = None
        self._timeout = 30.0
        return self

    def method(self, method: str) -> "HttpRequestBuilder":
        self._method = method.upper()
        return self

    def url(self, url: str) -> "HttpRequestBuilder":
        self._url = url
        return self

    def header(self, name: str, value: str) -> "HttpRequestBuilder":
        self._headers[name] = value
        return self

    def param(self, name: str, value: str) -> "HttpRequestBuilder":
        self._query.append((name, value))
        return self

    def json_body(self, body: str) -> "HttpRequestBuilder":
        self._body = body
        return self.header("Content-Type", "application/json")

    def timeout(self, seconds: float) -> "HttpRequestBuilder":
        self._timeout = seconds
        return self

    def build(self) -> HttpRequest:
        """Validate the collected parts and produce the request."""
        if not self._url:
            raise ValidationError("A request needs a URL")
        if self._method not in _METHODS:
            raise ValidationError(f"Unsupported method {self._method}", details=_METHODS)
        if self._body is not None and self._method == "GET":
            raise ValidationError("GET requests cannot carry a body")
        if self._timeout <= 0:
            raise ValidationError("Timeout must be positive")

        request = HttpRequest(
            method=self._method,
            url=self._url,
            headers=dict(self._headers),
            query=tuple(self._query),
            body=self._body,
            timeout=self._timeout,
        )
        self.reset()
        return request


class RequestDirector:
    """Knows the step sequences for commonly needed requests."""

    def __init__(self, builder: HttpRequestBuilder):
        self.builder = builder

    def health_check(self, base_url: str) -> HttpRequest:
        return self.builder.url(f"{base_url}/health").timeout(2.0).build()

    def create_resource(self, base_url: str, payload: str, token: str) -> HttpRequest:
        return (
            self.builder.method("POST")
            .url(f"{base_url}/resources")
            .header("Authorization", f"Bearer {token}")
            .json_body(payload)
            .build()
        )


@pattern_example(
    name="Builder",
    category=PatternCategory.CREATIONAL,
    intent="Separate the construction of a complex object from its representation so the same process can create different representations.",
    participants=(HttpRequestBuilder, RequestDirector),
    related=("abstract-factory", "composite"),
)
def demo() -> List[str]:
    builder = HttpRequestBuilder()
    lines = []

    search = builder.url("https://api.example.com/search").param("q", "patterns").param("page", "2").build()
    lines.append(f"{search.method} {search.full_url()}")

    director = RequestDirector(builder)
    health = director.health_check("https://api.example.com")
    lines.append(f"{health.method} {health.full_url()} timeout={health.timeout}")
    create = director.create_resource("https://api.example.com", '{"name": "demo"}', "s3cr3t")
    lines.append(f"{create.method} {create.full_url()} headers={sorted(create.headers)}")

    try:
        builder.method("POST").build()
    except ValidationError as e:
        lines.append(f"build rejected: {e}")
    return lines
