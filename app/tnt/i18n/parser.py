"""Translation file parsing.

Supports two document shapes, selected once per document:

- records (current): ``{"records": [[state, source, translated], ...]}``
- pairs (legacy): ``[[source, translated], ...]``

JSON is the default encoding; files with a ``.yml``/``.yaml`` suffix are
decoded as YAML.
"""

import json
from enum import Enum
from pathlib import Path
from typing import Any, Iterable, List, Optional, Tuple, Union

import yaml
from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError

import structlog
from tnt.i18n.exceptions import FileAccessError, ParseError
from tnt.i18n.models import DEFAULT_ACCEPTED_STATES, TranslationRecord

logger = structlog.get_logger()

YAML_SUFFIXES = {".yml", ".yaml"}


class TranslationFormat(str, Enum):
    """Document shapes of translation files."""

    RECORDS = "records"
    PAIRS = "pairs"


class RecordsDocument(BaseModel):
    """Current file shape; unknown top-level keys are ignored."""

    model_config = ConfigDict(extra="ignore")

    records: List[Tuple[str, str, str]]


_pairs_adapter = TypeAdapter(List[Tuple[str, str]])


class TranslationRecordParser:
    """Parses translation file contents into (source, translated) pairs.

    Attributes:
        accepted_states: Record states that are served; records in any
            other state (e.g. "new") are dropped.
    """

    def __init__(self, accepted_states: Optional[Iterable[str]] = None):
        self.accepted_states = frozenset(
            DEFAULT_ACCEPTED_STATES if accepted_states is None else accepted_states
        )

    def parse(
        self,
        content: Union[str, bytes],
        fmt: Optional[TranslationFormat] = None,
        source: Optional[Union[str, Path]] = None,
    ) -> List[Tuple[str, str]]:
        """Parse file content into usable translation pairs.

        Args:
            content: Raw file content.
            fmt: Document shape; sniffed from the document when None.
            source: Originating file, used to pick the decoder and in errors.

        Returns:
            (source, translated) pairs in file order.

        Raises:
            ParseError: If the content is not a valid translation document.
        """
        text = self._to_text(content, source)
        if not text.strip():
            logger.debug("empty_translation_file", file=str(source) if source else None)
            return []

        data = self._decode(text, source)
        detected = self._detect_format(data, source)
        if fmt is not None and TranslationFormat(fmt) != detected:
            raise ParseError(
                f"Expected {TranslationFormat(fmt).value} document in {source or '<content>'}, "
                f"found {detected.value}",
                source,
            )

        if detected is TranslationFormat.PAIRS:
            return [tuple(pair) for pair in self._validate_pairs(data, source)]

        records = self.parse_records(data, source)
        pairs = [
            (record.source, record.translated)
            for record in records
            if record.is_usable(self.accepted_states)
        ]
        if len(pairs) != len(records):
            logger.debug(
                "skipped_unusable_records",
                file=str(source) if source else None,
                skipped=len(records) - len(pairs),
            )
        return pairs

    def parse_records(
        self, data: Any, source: Optional[Union[str, Path]] = None
    ) -> List[TranslationRecord]:
        """Validate a decoded records document.

        Raises:
            ParseError: If the document does not match the records shape.
        """
        try:
            document = RecordsDocument.model_validate(data)
        except ValidationError as e:
            logger.error("translation_parse_error", file=str(source), error=str(e))
            raise ParseError(
                f"Invalid translation records in {source or '<content>'}: {e}", source
            ) from e
        return [TranslationRecord(*record) for record in document.records]

    def parse_file(
        self, path: Path, fmt: Optional[TranslationFormat] = None
    ) -> List[Tuple[str, str]]:
        """Read and parse a translation file.

        Raises:
            FileAccessError: If the file cannot be read.
            ParseError: If the file is not valid UTF-8 or not a valid document.
        """
        path = Path(path)
        try:
            raw = path.read_bytes()
        except OSError as e:
            raise FileAccessError(f"Cannot read {path}: {e}", path) from e
        return self.parse(raw, fmt=fmt, source=path)

    def _to_text(self, content: Union[str, bytes], source) -> str:
        if isinstance(content, str):
            return content
        try:
            return content.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            logger.error("translation_parse_error", file=str(source), error=str(e))
            raise ParseError(f"{source or '<content>'} is not UTF-8: {e}", source) from e

    def _decode(self, content: str, source) -> Any:
        use_yaml = source is not None and Path(source).suffix.lower() in YAML_SUFFIXES
        try:
            if use_yaml:
                return yaml.safe_load(content)
            return json.loads(content)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            logger.error("translation_parse_error", file=str(source), error=str(e))
            raise ParseError(f"Failed to parse {source or '<content>'}: {e}", source) from e

    def _detect_format(self, data: Any, source) -> TranslationFormat:
        if isinstance(data, dict) and "records" in data:
            return TranslationFormat.RECORDS
        if isinstance(data, list):
            return TranslationFormat.PAIRS
        logger.error("invalid_translation_document", file=str(source), type=type(data).__name__)
        raise ParseError(
            f"Unrecognized translation document in {source or '<content>'}: "
            "expected an object with 'records' or a list of pairs",
            source,
        )

    def _validate_pairs(self, data: Any, source) -> List[Tuple[str, str]]:
        try:
            return _pairs_adapter.validate_python(data)
        except ValidationError as e:
            logger.error("translation_parse_error", file=str(source), error=str(e))
            raise ParseError(
                f"Invalid translation pairs in {source or '<content>'}: {e}", source
            ) from e
