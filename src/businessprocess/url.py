"""Immutable URL value object.

Each transformation returns a new Url, so a renderer can strip action
parameters from the request URL without touching the caller's copy.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace
from urllib.parse import parse_qsl, quote, urlencode, urlsplit, urlunsplit


@dataclass(frozen=True, slots=True)
class Url:
    """An optional scheme and host, a path, and ordered query parameters.

    Parameters are stored as ``(name, value)`` pairs so repeated names
    and their order survive a round trip through ``str()``.
    """

    path: str = "/"
    params: tuple[tuple[str, str], ...] = ()
    scheme: str = ""
    netloc: str = ""

    @classmethod
    def parse(cls, url: str) -> Url:
        """Build a Url from relative or absolute text. Fragments are dropped."""
        parts = urlsplit(url)
        params = tuple(parse_qsl(parts.query, keep_blank_values=True))
        return cls(
            path=parts.path or "/",
            params=params,
            scheme=parts.scheme,
            netloc=parts.netloc,
        )

    # -- Queries --

    def get_param(self, name: str, default: str | None = None) -> str | None:
        """Return the first value for *name*, or *default* if missing."""
        for key, value in self.params:
            if key == name:
                return value
        return default

    def get_params(self, name: str) -> list[str]:
        """Return all values for *name*."""
        return [value for key, value in self.params if key == name]

    def has_param(self, name: str) -> bool:
        return any(key == name for key, _ in self.params)

    @property
    def query_string(self) -> str:
        return urlencode(self.params, quote_via=quote)

    # -- Chainable transformations --

    def without(self, names: str | Iterable[str]) -> Url:
        """Return a new Url without any parameter listed in *names*."""
        drop = {names} if isinstance(names, str) else set(names)
        return replace(self, params=tuple((k, v) for k, v in self.params if k not in drop))

    def with_param(self, name: str, value: object) -> Url:
        """Return a new Url where *name* has the single value *value*."""
        kept = tuple((k, v) for k, v in self.params if k != name)
        return replace(self, params=(*kept, (name, str(value))))

    def with_params(self, **params: object) -> Url:
        """Return a new Url with every keyword set as a parameter.

        ``None`` values remove the parameter instead.
        """
        url = self
        for name, value in params.items():
            url = url.without(name) if value is None else url.with_param(name, value)
        return url

    def with_param_list(self, name: str, values: Iterable[object]) -> Url:
        """Return a new Url where *name* repeats once per item of *values*."""
        kept = tuple((k, v) for k, v in self.params if k != name)
        return replace(self, params=(*kept, *((name, str(v)) for v in values)))

    def with_path(self, path: str) -> Url:
        return replace(self, path=path)

    @property
    def is_absolute(self) -> bool:
        return bool(self.netloc)

    def __str__(self) -> str:
        return urlunsplit((self.scheme, self.netloc, self.path, self.query_string, ""))
