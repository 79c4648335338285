"""Domain values for submitted jobs and the reports they produce."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, ClassVar, Iterator, Protocol

from appchains.core.errors import ConfigurationError


class ResultType(str, Enum):
    """Tag distinguishing the result value variants."""

    FILE = "file"
    TEXT = "text"

    def __str__(self) -> str:
        return self.value


class FileDownloader(Protocol):
    """Anything able to stream a remote file to a local path."""

    def download(self, url: str, destination: Path) -> Path:
        """Write the body served at ``url`` to ``destination``."""


@dataclass(frozen=True, slots=True)
class Job:
    """Identifier of a job accepted by the remote service."""

    job_id: int | str


@dataclass(frozen=True, slots=True)
class ResultProp:
    """One raw, typed property of a finished job."""

    name: str | None
    type: str | None
    value: str | None


@dataclass(frozen=True, slots=True)
class RawJobResult:
    """Decoded status response for a job, exactly as polled."""

    job_id: int | str
    status: str
    completed: bool
    succeeded: bool = False
    result_props: tuple[ResultProp, ...] = ()
    source: dict[str, Any] = field(default_factory=dict, compare=False, repr=False)


@dataclass(frozen=True, slots=True)
class TextResultValue:
    data: str

    kind: ClassVar[ResultType] = ResultType.TEXT


@dataclass(frozen=True, slots=True)
class FileResultValue:
    """A report file that is fetched only when the caller asks for it."""

    name: str
    extension: str
    url: str
    downloader: FileDownloader | None = field(default=None, compare=False, repr=False)

    kind: ClassVar[ResultType] = ResultType.FILE

    def save_as(self, path: str | Path) -> Path:
        """Download the file to ``path``."""

        if self.downloader is None:
            raise ConfigurationError(f"no downloader attached to {self.name}")
        return self.downloader.download(self.url, Path(path))

    def save_to(self, location: str | Path) -> Path:
        """Download the file into ``location`` under its generated name."""

        return self.save_as(Path(location) / self.name)


ResultValue = TextResultValue | FileResultValue


@dataclass(frozen=True, slots=True)
class Result:
    name: str
    value: ResultValue


@dataclass(frozen=True, slots=True)
class Report:
    """User facing outcome of a finished job."""

    succeeded: bool
    results: tuple[Result, ...] = ()

    def __iter__(self) -> Iterator[Result]:
        return iter(self.results)

    def get(self, name: str) -> Result | None:
        for result in self.results:
            if result.name == name:
                return result
        return None

    def text_results(self) -> list[Result]:
        return [result for result in self.results if result.value.kind is ResultType.TEXT]

    def file_results(self) -> list[Result]:
        return [result for result in self.results if result.value.kind is ResultType.FILE]


__all__ = [
    "FileDownloader",
    "FileResultValue",
    "Job",
    "RawJobResult",
    "Report",
    "Result",
    "ResultProp",
    "ResultType",
    "ResultValue",
    "TextResultValue",
]
