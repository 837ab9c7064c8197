from __future__ import annotations

import json
import logging
import math
from pathlib import Path
from typing import Dict, List, TypedDict

import typer
import yaml

from .config import ReadabilityConfig, load_config
from .formulas import FORMULA_LABELS, Formula
from .markup import build_stripper
from .models import Document, DocumentReport, Finding
from .pipeline import process_corpus
from .scoring import build_scorer_from_config

app = typer.Typer(help="Readability Helper CLI.", no_args_is_help=True)

# File types the CLI knows how to expand into Document instances.
SUPPORTED_INPUT_EXTENSIONS = {".md", ".markdown", ".txt"}


class FindingPayload(TypedDict):
    start: int
    length: int
    line: int
    column: int
    text: str
    message: str


class DocumentSummary(TypedDict):
    doc_id: str
    formula: str
    label: str
    score: float | str
    max_difficulty_score: float
    should_warn: bool
    findings: List[FindingPayload]


@app.command()
def analyze(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=True, file_okay=True
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    formula: str | None = typer.Option(
        None,
        "--formula",
        "-f",
        help="Formula to score with (e.g., 'flesch' or 'dale-chall').",
    ),
    max_difficulty_score: float | None = typer.Option(
        None,
        "--max-difficulty-score",
        help="Override the configured threshold for the selected formula.",
    ),
    highlight: bool | None = typer.Option(
        None,
        "--highlight/--no-highlight",
        help="Override config highlight_difficult_sentences flag.",
    ),
    markup: str | None = typer.Option(
        None, "--markup", help="Markup to strip before scoring ('markdown' or 'plain')."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output."),
) -> None:
    """Score the input documents and emit a JSON summary of difficult sentences."""
    _configure_logging(verbose)
    try:
        cfg = load_config(config)
        _apply_overrides(cfg, formula, max_difficulty_score, highlight, markup)
        stripper = build_stripper(cfg.markup)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    documents = _load_documents(input_path)
    scorer = build_scorer_from_config(cfg)
    results = process_corpus(documents, cfg, scorer, stripper)
    typer.echo(json.dumps({"documents": _build_summary(results)}, indent=2))


@app.command()
def score(
    text: str = typer.Argument(..., help="Text to score."),
    formula: str = typer.Option(
        Formula.AUTOMATED_READABILITY.value, "--formula", "-f", help="Formula name."
    ),
    markup: str = typer.Option("markdown", "--markup", help="Markup to strip first."),
) -> None:
    """Print the document score of a piece of text."""
    try:
        selected = Formula.parse(formula)
        stripper = build_stripper(markup)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    scorer = build_scorer_from_config(ReadabilityConfig())
    value = scorer.score_document(selected, stripper(text))
    typer.echo(f"{FORMULA_LABELS[selected]} score: {_format_score(value)}")


@app.command()
def formulas() -> None:
    """List the available formulas and which direction is easier."""
    for formula in Formula:
        direction = "higher is easier" if formula is Formula.FLESCH else "lower is easier"
        typer.echo(f"{formula.value}\t{FORMULA_LABELS[formula]}\t{direction}")


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = ReadabilityConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def _configure_logging(verbose: bool) -> None:
    # Logs go to stderr so the JSON summary on stdout stays parseable.
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _apply_overrides(
    config: ReadabilityConfig,
    formula: str | None,
    max_difficulty_score: float | None,
    highlight: bool | None,
    markup: str | None,
) -> None:
    """Apply CLI overrides to the loaded configuration when provided."""
    if formula:
        config.formula = Formula.parse(formula).value
    else:
        # Validate the configured name before any document is read.
        Formula.parse(config.formula)
    if max_difficulty_score is not None:
        selected = Formula.parse(config.formula).value
        config.max_difficulty_scores[selected] = max_difficulty_score
    if highlight is not None:
        config.highlight_difficult_sentences = highlight
    if markup:
        config.markup = markup


def _load_documents(input_path: Path) -> List[Document]:
    """Expand the input path into documents keyed by their relative path."""
    if input_path.is_file():
        return [_document_from_file(input_path, input_path.name)]

    files = sorted(
        p
        for p in input_path.rglob("*")
        if p.is_file() and p.suffix.lower() in SUPPORTED_INPUT_EXTENSIONS
    )
    return [_document_from_file(file, str(file.relative_to(input_path))) for file in files]


def _document_from_file(path: Path, doc_id: str) -> Document:
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise typer.BadParameter(f"{path} is not UTF-8 text: {exc}") from exc
    return Document(doc_id=doc_id, text=text)


def _build_summary(results: Dict[str, DocumentReport]) -> List[DocumentSummary]:
    """Create a JSON-serializable summary for each processed document."""
    summary: List[DocumentSummary] = []
    for doc_id, report in sorted(results.items()):
        summary.append(
            {
                "doc_id": doc_id,
                "formula": report.formula,
                "label": report.label,
                "score": _json_score(report.score),
                "max_difficulty_score": report.max_difficulty_score,
                "should_warn": report.should_warn,
                "findings": [_finding_dict(f) for f in report.findings],
            }
        )
    return summary


def _finding_dict(finding: Finding) -> FindingPayload:
    return {
        "start": finding.start,
        "length": finding.length,
        "line": finding.line,
        "column": finding.column,
        "text": finding.text,
        "message": finding.message,
    }


def _json_score(value: float) -> float | str:
    """Non-finite scores are not valid JSON numbers, so emit them as strings."""
    if math.isfinite(value):
        return value
    if math.isnan(value):
        return "NaN"
    return "Infinity" if value > 0 else "-Infinity"


def _format_score(value: float) -> str:
    if math.isfinite(value) and float(value).is_integer():
        return str(int(value))
    return str(value)


if __name__ == "__main__":
    main()
