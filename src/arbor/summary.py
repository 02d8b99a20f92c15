from dataclasses import dataclass

from arbor.config import ParserConfig
from arbor.exceptions import UnsupportedLanguageError
from arbor.models import ClassEntity, FunctionEntity, ImportEntity, ParseResult, SupportedLanguage
from arbor.parsers import get_parser


@dataclass(frozen=True)
class FileSummary:
    """A parse result together with every entity extracted from it."""
    result: ParseResult
    functions: list[FunctionEntity]
    classes: list[ClassEntity]
    imports: list[ImportEntity]


def summarize_source(
    source_code: str,
    language: SupportedLanguage | str,
    config: ParserConfig | None = None
) -> FileSummary:
    """Parse source code and extract all entities in one step.

    Args:
        source_code: Decoded source text of one file
        language: Language tag for the source
        config: Parser configuration (defaults if None)

    Returns:
        FileSummary for the source

    Raises:
        UnsupportedLanguageError: If no parser exists for the language
    """
    parser = get_parser(language, config)
    if parser is None:
        raise UnsupportedLanguageError(f"Unsupported language: {language}")

    result = parser.parse(source_code)

    return FileSummary(
        result=result,
        functions=parser.extract_functions(result.root),
        classes=parser.extract_classes(result.root),
        imports=parser.extract_imports(result.root),
    )
