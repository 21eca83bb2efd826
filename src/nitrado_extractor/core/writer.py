"""Persistence of raw apiDoc data and converted OpenAPI documents."""

import json
from pathlib import Path

import yaml

from nitrado_extractor.config import FileFormat


class NoAliasDumper(yaml.SafeDumper):
    """SafeDumper that writes repeated response blocks out in full.

    Every operation carries equal 401/403/404/500 dicts; without this the
    YAML output would be littered with ``&id001`` anchors.
    """

    def ignore_aliases(self, data):
        return True


def output_filename(basename: str, file_format: FileFormat) -> str:
    """File name for a document written in ``file_format``, e.g. ``nitrado-openapi.yaml``."""
    return f"{basename}.{file_format.value}"


def write_spec(data: dict, path: Path, file_format: FileFormat) -> Path:
    """Write ``data`` to ``path``, creating the output directory on demand.

    JSON is indented by two spaces and ends with a newline so repeated
    extractions diff cleanly; YAML keeps the document's key order.

    Returns:
        The written path
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    if file_format == FileFormat.JSON:
        text = json.dumps(data, indent=2, ensure_ascii=False) + "\n"
    elif file_format == FileFormat.YAML:
        text = yaml.dump(
            data,
            Dumper=NoAliasDumper,
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False,
            indent=2,
        )
    else:
        raise ValueError(f"Unsupported file format: {file_format}")

    path.write_text(text, encoding="utf-8")
    return path
