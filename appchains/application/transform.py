"""Conversion of raw job results into user facing reports."""
from __future__ import annotations

import logging
from typing import Callable

from appchains.core.urls import report_file_url
from appchains.domain import (
    FileDownloader,
    FileResultValue,
    RawJobResult,
    Report,
    Result,
    ResultProp,
    ResultValue,
    TextResultValue,
)

logger = logging.getLogger(__name__)

ResultBuilder = Callable[["ResultTransformer", RawJobResult, ResultProp, str], ResultValue]


def _text_value(
    transformer: "ResultTransformer", raw: RawJobResult, prop: ResultProp, type_name: str
) -> ResultValue:
    return TextResultValue(prop.value)


def _file_value(
    transformer: "ResultTransformer", raw: RawJobResult, prop: ResultProp, type_name: str
) -> ResultValue:
    return FileResultValue(
        name=f"report_{raw.job_id}.{type_name}",
        extension=type_name,
        url=report_file_url(transformer.base_url, prop.value),
        downloader=transformer.downloader,
    )


DEFAULT_BUILDERS: dict[str, ResultBuilder] = {
    "plaintext": _text_value,
    "pdf": _file_value,
}


class ResultTransformer:
    """Classifies result properties by declared type.

    Properties with a missing name, type or value, and properties whose type
    has no registered builder, are left out of the report.
    """

    def __init__(self, base_url: str, downloader: FileDownloader | None = None) -> None:
        self.base_url = base_url
        self.downloader = downloader
        self._builders: dict[str, ResultBuilder] = dict(DEFAULT_BUILDERS)

    def register(self, type_name: str, builder: ResultBuilder) -> None:
        self._builders[type_name.lower()] = builder

    @property
    def known_types(self) -> frozenset[str]:
        return frozenset(self._builders)

    def classify(self, raw: RawJobResult) -> Report:
        results: list[Result] = []
        for prop in raw.result_props:
            if prop.name is None or prop.type is None or prop.value is None:
                logger.debug("Job %s: skipping incomplete result property %r", raw.job_id, prop)
                continue

            type_name = prop.type.lower()
            builder = self._builders.get(type_name)
            if builder is None:
                logger.debug("Job %s: skipping %s with unknown type %s", raw.job_id, prop.name, prop.type)
                continue
            results.append(Result(name=prop.name, value=builder(self, raw, prop, type_name)))

        return Report(succeeded=raw.succeeded, results=tuple(results))


__all__ = ["DEFAULT_BUILDERS", "ResultBuilder", "ResultTransformer"]
