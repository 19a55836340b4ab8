from __future__ import annotations

from dataclasses import dataclass

import pytest


@dataclass
class StubResponse:
    body: str

    async def text(self) -> str:
        return self.body


class StubReader:
    """Stands in for a fetch-style reader; locators are the raw file texts."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    def __call__(self, locator: str) -> StubResponse:
        self.calls.append(locator)
        return StubResponse(locator)


@pytest.fixture
def reader() -> StubReader:
    return StubReader()
