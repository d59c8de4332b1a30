"""YAML/dict config loader for textscrub.

Supports loading from a YAML file or a plain dict (for embedding in a
larger application config).

Example YAML:

    textscrub:
      types:
        - link
        - email
      custom_pattern: "ORDER-\\d{6}"
      threshold: [profane, sexual, severe]
      strict_alignment: false
      words:
        - word: moron
          severity: mean
        - word: dingus           # severity defaults to "inappropriate"
      allow_list:
        - scunthorpe
"""

from __future__ import annotations
from pathlib import Path
from typing import Any

from .dictionary import VulgarDictionary
from .redactor import Redactor, RedactorConfig
from .types import MatchKind, Severity, VulgarEntry


def _parse_word(item: Any) -> VulgarEntry:
    if isinstance(item, VulgarEntry):
        return item
    if isinstance(item, str):
        return VulgarEntry(item)
    severity = item.get("severity")
    if severity is None:
        return VulgarEntry(item.get("word", ""))
    return VulgarEntry(item.get("word", ""), Severity.parse(severity))


def load_config(data: dict[str, Any]) -> dict[str, Any]:
    """Normalize a config dict (from YAML or inline)."""
    # Support nested under "textscrub" key or flat
    if "textscrub" in data:
        data = data["textscrub"] or {}

    types = data.get("types") or []
    if isinstance(types, str):
        types = types.split(",")

    words = [_parse_word(w) for w in data.get("words") or []]
    words.extend(VulgarEntry(w, Severity.SAFE) for w in data.get("allow_list") or [])

    return {
        "types": MatchKind.canonical(t for t in types if not isinstance(t, str) or t.strip()),
        "custom_pattern": data.get("custom_pattern"),
        "threshold": Severity.parse(data.get("threshold", "any")),
        "strict_alignment": bool(data.get("strict_alignment", False)),
        "words": words,
    }


def load_from_yaml(path: str | Path) -> dict[str, Any]:
    """Load config from a YAML file."""
    import yaml
    with open(path, encoding="utf-8") as f:
        return load_config(yaml.safe_load(f) or {})


def create_redactor(
    config: dict[str, Any],
    dictionary: VulgarDictionary | None = None,
) -> Redactor:
    """Create a fully configured redactor from a config dict.

    Configured words and allow-list entries are registered in
    ``dictionary`` (the process-wide one when omitted).
    """
    cfg = load_config(config)

    redactor = Redactor(
        RedactorConfig(
            default_types=cfg["types"],
            default_custom_pattern=cfg["custom_pattern"],
            threshold=cfg["threshold"],
            strict_alignment=cfg["strict_alignment"],
        ),
        dictionary=dictionary,
    )
    if cfg["words"]:
        redactor.add_words(cfg["words"])
    return redactor
