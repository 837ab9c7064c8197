from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Mapping, MutableMapping

import yaml


def _default_max_difficulty_scores() -> Dict[str, float]:
    return {
        "automated-readability": 10.0,
        "coleman-liau": 10.0,
        "dale-chall": 8.0,
        "flesch": 60.0,
        "flesch-kincaid": 10.0,
        "smog": 10.0,
        "spache": 5.0,
    }


@dataclass(slots=True)
class ReadabilityConfig:
    """Configuration options for readability scoring and sentence highlighting."""

    formula: str = "automated-readability"
    highlight_difficult_sentences: bool = True
    max_difficulty_scores: Dict[str, float] = field(
        default_factory=_default_max_difficulty_scores
    )
    max_difficult_sentences: int = 3
    markup: str = "markdown"
    vocabulary_paths: Dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {field.name for field in fields(ReadabilityConfig)}
    kwargs = {key: data[key] for key in data if key in allowed}
    for key in ("max_difficulty_scores", "vocabulary_paths"):
        if key in kwargs and not isinstance(kwargs[key], Mapping):
            raise ValueError(f"Configuration field '{key}' must be a mapping.")
    if "max_difficulty_scores" in kwargs:
        # Partial threshold maps only override the formulas they mention.
        scores = _default_max_difficulty_scores()
        scores.update(
            {str(name): float(value) for name, value in kwargs["max_difficulty_scores"].items()}
        )
        kwargs["max_difficulty_scores"] = scores
    if "vocabulary_paths" in kwargs:
        kwargs["vocabulary_paths"] = {
            str(name): str(value) for name, value in kwargs["vocabulary_paths"].items()
        }
    return kwargs


def config_from_dict(data: Mapping[str, Any] | None) -> ReadabilityConfig:
    """Build a ReadabilityConfig from a dictionary-like input."""
    if data is None:
        return ReadabilityConfig()
    return ReadabilityConfig(**_build_kwargs(data))


def config_from_yaml(path: str | Path) -> ReadabilityConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> ReadabilityConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return ReadabilityConfig()
    return config_from_yaml(path)
