from __future__ import annotations

from typing import Callable, Sequence, Union

import pytest

from lanprint.services.commands import CommandError

Response = Union[str, Exception, Callable[[list], str]]


class FakeRunner:
    """Stands in for run_command: scripted responses keyed by program name."""

    def __init__(self, responses: dict[str, Response] | None = None) -> None:
        self.responses = dict(responses or {})
        self.calls: list[list[str]] = []

    async def __call__(self, argv: Sequence[str]) -> str:
        argv = list(argv)
        self.calls.append(argv)
        key = " ".join(argv[:2]) if " ".join(argv[:2]) in self.responses else argv[0]
        if key not in self.responses:
            raise CommandError(f"{argv[0]}: No such file or directory")
        response = self.responses[key]
        if isinstance(response, Exception):
            raise response
        if callable(response):
            return response(argv)
        return response

    def programs(self) -> list[str]:
        return [c[0] for c in self.calls]


@pytest.fixture
def fake_runner() -> Callable[..., FakeRunner]:
    return FakeRunner


@pytest.fixture
def sample_pdf(tmp_path):
    path = tmp_path / "report.pdf"
    path.write_bytes(b"%PDF-1.4\n%fake\n")
    return path
