import json
import logging
import os
import pathlib
import sys
from collections.abc import Mapping

import click
import yaml

from stringaudit import engine, export
from stringaudit.config import ConfigError, Settings, load_config
from stringaudit.registry import build_registry
from stringaudit.spelling import seed_dictionary_expansion

logger = logging.getLogger(__name__)

DEFAULT_LOGGING = {
    "level": "INFO",
    "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
    "datefmt": "%Y-%m-%d %H:%M:%S",
}


def read_word_lists(dictionaries: Mapping[str, str], config_folder: str) -> dict[str, list[str]]:
    word_lists = {}
    for locale, path in dictionaries.items():
        file = pathlib.Path(config_folder) / path
        logger.debug(f"Reading word list {file}")
        try:
            word_lists[locale] = file.read_text("utf-8").split()
        except OSError as ex:
            raise ConfigError(f"dictionaries.{locale}: cannot read word list {file}: {ex}") from ex
    return word_lists


def acquire_lock(path: str) -> int | None:
    try:
        return os.open(path, os.O_CREAT | os.O_EXCL | os.O_WRONLY)
    except FileExistsError:
        return None


def release_lock(path: str, fd: int) -> None:
    os.close(fd)
    os.remove(path)


@click.group()
@click.version_option(package_name="string-audit")
def cli() -> None:
    pass


@cli.command("check")
@click.option("--config-folder", default="config", help="Configuration folder path.")
@click.option("--catalog", "catalog_path", required=True, help="JSON catalog: key -> locale -> value.")
@click.option("--output", default="-", help="Where to write the JSON report.")
@click.option("--workers", type=int, default=None, help="Worker threads, overrides the config.")
@click.option("--lock-file", default=None, help="Fail immediately if this lock file exists.")
@click.version_option(package_name="string-audit")
def check(
    config_folder: str,
    catalog_path: str,
    output: str,
    workers: int | None,
    lock_file: str | None,
) -> None:
    config_folder_path = os.path.abspath(config_folder)
    config_file_path = os.path.abspath(f"{config_folder_path}/config.yml")

    try:
        config = load_config(config_file_path)
    except (yaml.YAMLError, ConfigError) as exc:
        logger.error(sys._getframe().f_code.co_name + " " + str(exc))
        sys.exit(1)

    logging_config = {**DEFAULT_LOGGING, **(config.get("logging") or {})}
    logging.basicConfig(
        level=logging.getLevelName(logging_config["level"]),
        format=logging_config["format"],
        datefmt=logging_config["datefmt"],
    )

    try:
        settings = Settings.from_config(config.get("audit"))
    except ConfigError as exc:
        logger.error(f"Invalid configuration: {exc}")
        sys.exit(1)

    lock = None
    if lock_file:
        lock = acquire_lock(lock_file)
        if lock is None:
            logger.error(f"Update already in progress ({lock_file}), stopping!")
            sys.exit(2)

    try:
        catalog = json.loads(pathlib.Path(catalog_path).read_text("utf-8"))
        try:
            word_lists = read_word_lists(settings.dictionaries, config_folder_path)
        except ConfigError as exc:
            logger.error(f"Invalid configuration: {exc}")
            sys.exit(1)
        registry = build_registry(settings, word_lists)
        result = engine.run_audit(catalog, settings, registry, workers)
    finally:
        if lock is not None:
            release_lock(lock_file, lock)

    data = export.result_to_dict(result)
    data["dictsExpansion"] = seed_dictionary_expansion(
        {k: list(v) for k, v in settings.dicts_expansion.items()},
        sorted(registry.dictionaries),
    )

    reports = result.key_reports.values()
    for name, attr in (
        ("placeholders", "placeholders"),
        ("first character", "first_char_type"),
        ("last character", "last_char_type"),
        ("tags", "tags"),
        ("length", "length"),
        ("dynamic values", "dynamic_numbers"),
        ("typos", "typos"),
        ("style", "style_issues"),
        ("insensitiveness", "bias_issues"),
    ):
        count = sum(1 for x in reports if getattr(x, attr))
        if count:
            logger.error(f"Found {count} keys with inconsistent {name}")
        else:
            logger.info(f"No issues found for {name}")

    text = export.dumps(data)
    if output == "-":
        click.echo(text)
    else:
        pathlib.Path(output).write_text(text + "\n", "utf-8")
        logger.info(f"Report written to {output}")
