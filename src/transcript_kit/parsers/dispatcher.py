# src/transcript_kit/parsers/dispatcher.py

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from time import monotonic

from transcript_kit.observability import names
from transcript_kit.observability.base import MetricsHook, NoOpMetricsHook

from .base import Source
from .config import ParsingConfig
from .errors import ParseError, UnreadableFileError, UnsupportedFormatError
from .models import DocumentKind, ParsedDocument, kind_for_extension, normalize_extension
from .registry import ParserRegistry, build_default_registry

logger = logging.getLogger(__name__)


def parse(
    source: Source,
    *,
    extension: str,
    kind: DocumentKind,
    source_name: str = "",
    registry: ParserRegistry | None = None,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> ParsedDocument:
    """Parse raw content into a ParsedDocument.

    Args:
        source: Raw bytes or a readable binary stream. Streams are read but
            not closed; the caller owns them.
        extension: Original file extension, with or without the dot.
        kind: Caller's coarse classification, recorded as given.
        source_name: Base file name for diagnostics.
        registry: Parser table. Defaults to build_default_registry().
        metrics_hook: Optional metrics hook for observability.

    Returns:
        The parsed document.

    Raises:
        UnsupportedFormatError: If no parser handles this kind/extension.
        ParseError: Any format-specific failure, exactly one per call.
    """
    registry = registry or build_default_registry()
    parser = registry.resolve(kind, extension)
    if parser is None:
        raise UnsupportedFormatError(
            f"No parser for {kind.value} files with extension "
            f"'{normalize_extension(extension)}'",
            source_name,
        )

    labels = {"format": parser.format_name}
    start = monotonic()
    logger.debug("Parsing %s with %s", source_name or "<bytes>", type(parser).__name__)

    try:
        document = parser.parse(source, source_name=source_name, kind=kind)
    except ParseError as exc:
        metrics_hook.increment(
            names.PARSE_ERRORS_TOTAL,
            labels={**labels, "error": type(exc).__name__},
        )
        raise

    elapsed_ms = 1000 * (monotonic() - start)
    metrics_hook.record_latency(names.PARSE_DURATION, elapsed_ms, labels=labels)
    metrics_hook.increment(names.PARSE_REQUESTS_TOTAL, labels=labels)
    metrics_hook.increment(
        names.PARSE_SEGMENTS_TOTAL, len(document.segments), labels=labels
    )

    logger.info(
        "Parsed %s: format=%s, segments=%d, chars=%d, latency=%.0fms",
        source_name or "<bytes>",
        parser.format_name,
        len(document.segments),
        len(document.full_text),
        elapsed_ms,
    )
    return document


def placeholder_document(
    source_name: str, kind: DocumentKind, extension: str
) -> ParsedDocument:
    """Stand-in for formats that are acknowledged but not parsed yet."""
    if kind is DocumentKind.AUDIO:
        text = "[Audio transcription is not yet supported]"
    else:
        label = normalize_extension(extension).upper() or kind.value.capitalize()
        text = f"[{label} parsing is not yet supported]"

    return ParsedDocument(
        source_file_name=source_name,
        document_kind=kind,
        full_text=text,
        segments=(),
        is_placeholder=True,
    )


def parse_file(
    path: str | Path,
    *,
    kind: DocumentKind | None = None,
    config: ParsingConfig = ParsingConfig(),
    registry: ParserRegistry | None = None,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> ParsedDocument:
    """Open, parse and release one file.

    The extension comes from the path; the kind is derived from it unless
    given. Capability gaps yield a placeholder document when
    config.placeholder_for_unsupported is set.
    """
    path = Path(path)
    extension = normalize_extension(path.suffix)
    kind = kind or kind_for_extension(extension, config.default_kind)
    registry = registry or build_default_registry()

    if registry.resolve(kind, extension) is None:
        if not config.placeholder_for_unsupported:
            raise UnsupportedFormatError(
                f"No parser for {kind.value} files with extension '{extension}'",
                path.name,
            )
        logger.info("No parser for %s (%s); using placeholder", path.name, kind.value)
        metrics_hook.increment(
            names.PARSE_PLACEHOLDERS_TOTAL, labels={"kind": kind.value}
        )
        return placeholder_document(path.name, kind, extension)

    try:
        handle = path.open("rb")
    except OSError as exc:
        logger.error("Unable to open %s: %s", path, exc)
        raise UnreadableFileError(f"Unable to read file: {exc}", path.name) from exc

    with handle:
        return parse(
            handle,
            extension=extension,
            kind=kind,
            source_name=path.name,
            registry=registry,
            metrics_hook=metrics_hook,
        )


@dataclass(frozen=True)
class ParseOutcome:
    """Result of one file in a batch: a document or the error it raised."""

    path: Path
    document: ParsedDocument | None = None
    error: ParseError | None = None

    @property
    def ok(self) -> bool:
        return self.document is not None


def parse_files(
    paths: Iterable[str | Path],
    *,
    config: ParsingConfig = ParsingConfig(),
    registry: ParserRegistry | None = None,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> list[ParseOutcome]:
    """Parse each file independently; one failure never aborts the batch."""
    registry = registry or build_default_registry()
    outcomes: list[ParseOutcome] = []

    for raw_path in paths:
        path = Path(raw_path)
        try:
            document = parse_file(
                path, config=config, registry=registry, metrics_hook=metrics_hook
            )
        except ParseError as exc:
            logger.error("Failed to parse %s: %s", path, exc)
            outcomes.append(ParseOutcome(path=path, error=exc))
            continue
        outcomes.append(ParseOutcome(path=path, document=document))

    metrics_hook.record_gauge(names.PARSE_BATCH_SIZE, len(outcomes))
    failed = sum(1 for outcome in outcomes if not outcome.ok)
    logger.info("Parsed batch of %d files, %d failed", len(outcomes), failed)
    return outcomes
