"""Documentation block tokenizer and backward scanner.

A doc block sits directly above a property declaration:

    /**
     * The user's display name.
     * @var string
     */
    private $name;

Every line of the block is tokenized into a tagged DocLine, and a small state
machine walks those lines upward from the declaration, collecting the `@var`
type and the free-text description.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)

BLOCK_OPENER = "/**"
BLOCK_CLOSER = "*/"
VAR_TAG = "@var"

_DOC_MARKER = "*"
_ANNOTATION_PREFIX = "@"


@dataclass(frozen=True)
class BlockOpen:
    """Opening line of a block, or a line that cannot belong to one."""

    text: str


@dataclass(frozen=True)
class BlockClose:
    """Closing line of a block."""

    text: str


@dataclass(frozen=True)
class AnnotationLine:
    """A `@tag` line; arguments are the tokens following the tag."""

    tag: str
    arguments: tuple[str, ...]


@dataclass(frozen=True)
class TextLine:
    """A free-text line inside a block."""

    tokens: tuple[str, ...]

    @property
    def text(self) -> str:
        """Tokens joined with single spaces."""
        return " ".join(self.tokens)


DocLine = BlockOpen | BlockClose | AnnotationLine | TextLine


def tokenize_doc_line(text: str) -> DocLine:
    """Classify a single source line as seen from inside a doc block.

    Args:
        text: Raw line text

    Returns:
        The tagged line

    """
    if BLOCK_OPENER in text or _DOC_MARKER not in text:
        return BlockOpen(text)
    if text.endswith(BLOCK_CLOSER):
        return BlockClose(text)

    tokens = tuple(token for token in text.split() if token != _DOC_MARKER)
    if VAR_TAG in tokens:
        position = tokens.index(VAR_TAG)
        return AnnotationLine(VAR_TAG, tokens[position + 1 :])
    if tokens and tokens[0].startswith(_ANNOTATION_PREFIX):
        return AnnotationLine(tokens[0], tokens[1:])
    return TextLine(tokens)


class ScanState(Enum):
    """States of the doc block scanner."""

    SCANNING = "scanning"
    DONE = "done"


@dataclass(frozen=True)
class DocBlockFindings:
    """What a doc block says about a property."""

    type: str | None = None
    description: str | None = None


class DocBlockScanner:
    """Backward scanner over the doc block preceding a declaration.

    Lines are consumed nearest-first. The scan is DONE at the block boundary
    or as soon as both a type and a description are known. A type known from
    the declaration itself counts towards that condition, so an inline-typed
    property stops at the first description line.

    Description precedence: each free-text line overwrites the previous one,
    so the farthest line read before the scan stops wins. A `@var` line only
    sets the description when it carries text after the type.
    """

    def __init__(self, known_type: str | None = None) -> None:
        """Initialise the scanner.

        Args:
            known_type: Type already known from the declaration line

        """
        self._known_type = known_type
        self._type: str | None = None
        self._description: str | None = None
        self.state = ScanState.SCANNING

    @property
    def findings(self) -> DocBlockFindings:
        """Type and description collected so far."""
        return DocBlockFindings(type=self._type, description=self._description)

    def feed(self, line: DocLine) -> ScanState:
        """Consume the next line (moving away from the declaration)."""
        if self.state is ScanState.DONE:
            return self.state

        if self._is_complete():
            self.state = ScanState.DONE
            return self.state

        match line:
            case BlockOpen() | BlockClose():
                self.state = ScanState.DONE
            case AnnotationLine(tag=tag, arguments=arguments) if tag == VAR_TAG:
                self._consume_var(arguments)
            case AnnotationLine():
                pass
            case TextLine() if line.tokens:
                self._description = line.text

        return self.state

    def _consume_var(self, arguments: tuple[str, ...]) -> None:
        if not arguments:
            return
        self._type = arguments[0]
        if len(arguments) > 1:
            self._description = " ".join(arguments[1:])

    def _is_complete(self) -> bool:
        has_type = self._type is not None or self._known_type is not None
        return has_type and self._description is not None


def scan_doc_block(
    line_text: Callable[[int], str],
    declaration_line: int,
    known_type: str | None = None,
) -> DocBlockFindings:
    """Scan the doc block directly above a declaration.

    The line right above the declaration must close a block, otherwise there
    is no doc block and nothing is found. Scanning starts one line above the
    closer and never reads line 0.

    Args:
        line_text: Returns the text of a line by zero-based index
        declaration_line: Index of the declaration line
        known_type: Type already known from the declaration line

    Returns:
        DocBlockFindings with the `@var` type and description (both optional)

    """
    closing_line = declaration_line - 1
    if closing_line <= 0:
        return DocBlockFindings()

    if not line_text(closing_line).endswith(BLOCK_CLOSER):
        logger.debug("No doc block above line %d", declaration_line)
        return DocBlockFindings()

    scanner = DocBlockScanner(known_type=known_type)
    for line_number in range(closing_line - 1, 0, -1):
        if scanner.feed(tokenize_doc_line(line_text(line_number))) is ScanState.DONE:
            break

    findings = scanner.findings
    logger.debug(
        "Doc block above line %d: type=%r description=%r",
        declaration_line,
        findings.type,
        findings.description,
    )
    return findings
