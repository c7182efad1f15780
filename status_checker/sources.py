from __future__ import annotations

from pathlib import Path
from typing import Iterable

import yaml

YAML_SUFFIXES = {".yml", ".yaml"}


class UrlSourceError(RuntimeError):
    pass


def parse_url_lines(text: str) -> list[str]:
    urls: list[str] = []
    for line in text.splitlines():
        line = line.strip()
        if line and not line.startswith("#"):
            urls.append(line)
    return urls


def _urls_from_yaml(data: object, path: Path) -> list[str]:
    if isinstance(data, dict):
        data = data.get("urls")
    if data is None:
        return []
    if not isinstance(data, list) or not all(isinstance(u, str) for u in data):
        raise UrlSourceError(f"{path}: expected a list of URL strings")
    return [u.strip() for u in data if u.strip()]


def load_url_file(path: str | Path) -> list[str]:
    """
    Read URLs from a text file (one per line, '#' comments) or from a YAML
    file holding either a plain list or a mapping with a ``urls`` list.
    """
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except OSError as e:
        raise UrlSourceError(f"Error reading file {p}: {e}") from e

    if p.suffix.lower() not in YAML_SUFFIXES:
        return parse_url_lines(text)

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise UrlSourceError(f"Invalid YAML in {p}: {e}") from e
    return _urls_from_yaml(data, p)


def collect_urls(args: Iterable[str], file_path: str | Path | None = None) -> list[str]:
    urls = list(args)
    if file_path is not None:
        urls.extend(load_url_file(file_path))
    return urls
