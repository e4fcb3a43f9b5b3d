import json
import logging
from collections.abc import Mapping
from typing import Any, TypeVar

from stringaudit.classes import AuditResult

logger = logging.getLogger(__name__)

T = TypeVar("T")


def exportable(items: Mapping[str, T]) -> dict[str, T]:
    # Keys with line breaks can't be stored downstream
    result = {}
    for key, value in items.items():
        if "\n" in key:
            logger.warning(f"Invalid key with unsupported characters (omitting): {key!r}")
            continue
        result[key] = value
    return result


def result_to_dict(result: AuditResult) -> dict[str, Any]:
    return {
        "items": {
            key: report.to_dict()
            for key, report in exportable(result.key_reports).items()
        },
        "translations": {
            key: {locale: x.to_dict() for locale, x in locales.items()}
            for key, locales in exportable(result.annotations).items()
        },
        "collections": {
            name: report.to_dict() for name, report in result.collection_reports.items()
        },
        "locales": {"list": list(result.locales)},
    }


def dumps(data: Mapping[str, Any]) -> str:
    return json.dumps(data, ensure_ascii=False, indent=2, sort_keys=True)
