import logging
from collections.abc import Callable, Iterable, Mapping
from concurrent.futures import ThreadPoolExecutor
from typing import Any, TypeVar

from stringaudit.aggregator import aggregate_collection, aggregate_key
from stringaudit.annotator import annotate
from stringaudit.classes import Annotation, AuditResult
from stringaudit.config import Settings
from stringaudit.registry import Registry, build_registry

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


def annotate_key(
    key: str, values: Any, settings: Settings, registry: Registry
) -> dict[str, Annotation]:
    if not isinstance(values, Mapping):
        logger.warning(f"Key {key} has no locale mapping, skipping its values")
        return {}
    return {
        locale: annotate(key, locale, values[locale], settings, registry)
        for locale in sorted(values)
    }


def run_parallel(
    fn: Callable[[T], R], items: Iterable[T], workers: int
) -> dict[T, R]:
    items = list(items)
    if workers <= 1:
        return {item: fn(item) for item in items}

    results: dict[T, R] = {}
    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = {executor.submit(fn, item): item for item in items}
        for future, item in futures.items():
            results[item] = future.result()
    # keep input order so reports don't depend on scheduling
    return {item: results[item] for item in items}


def run_audit(
    catalog: Mapping[str, Any],
    settings: Settings | None = None,
    registry: Registry | None = None,
    workers: int | None = None,
) -> AuditResult:
    settings = settings or Settings()
    registry = registry or build_registry(settings)
    workers = settings.workers if workers is None else workers

    keys = sorted(catalog)
    logger.info(f"Annotating {len(keys)} keys with {max(workers, 1)} worker(s)...")
    annotations = run_parallel(
        lambda key: annotate_key(key, catalog[key], settings, registry), keys, workers
    )

    logger.info("Comparing translations of each key...")
    key_reports = run_parallel(
        lambda key: aggregate_key(
            key, annotations[key], settings, registry.max_expansion_ratio
        ),
        keys,
        workers,
    )

    logger.info(f"Checking {len(settings.collections)} collections...")
    definitions = {x.name: x for x in settings.collections}
    collection_reports = run_parallel(
        lambda name: aggregate_collection(definitions[name], annotations),
        sorted(definitions),
        workers,
    )

    locales = sorted({locale for x in annotations.values() for locale in x})
    return AuditResult(annotations, key_reports, collection_reports, tuple(locales))
