"""
Command-line interface for the LLM line filter.

Reads lines from a file or stdin, asks the model the question for every
line and writes kept lines (or all lines with a +/- marker) to a file or
stdout. Diagnostics always go to stderr.
"""

import asyncio
import sys
from contextlib import ExitStack
from pathlib import Path
from typing import Iterable, NoReturn, Optional, TextIO

import structlog
import typer
from jinja2 import TemplateError
from pydantic import ValidationError

from line_filter.classification.classifier import Classifier
from line_filter.config import get_settings
from line_filter.filtering.driver import FilterDriver
from line_filter.llm.base_client import BaseLLMClient
from line_filter.llm.ollama_client import OllamaClient
from line_filter.llm.prompt_builder import PromptBuilder
from line_filter.logging_config import configure_logging
from line_filter.models.enums import DisplayMode, KeepPolicy
from line_filter.models.filter_models import FilterOptions

app = typer.Typer(
    name="line-filter",
    help="Filter lines of text by asking an Ollama model a yes/no question about each one.",
    add_completion=False,
)

logger = structlog.get_logger(__name__)


def fail(message: str) -> NoReturn:
    """Report a configuration error and stop before any line is processed."""
    typer.echo(f"Error: {message}", err=True)
    raise typer.Exit(1)


def resolve_question(question: Optional[str], question_file: Optional[Path]) -> str:
    """Return the question given literally or loaded from a file."""
    if question and question_file:
        fail("--question and --question-file are mutually exclusive")
    if question_file is not None:
        try:
            question = question_file.read_text(encoding="utf-8").strip()
        except (OSError, UnicodeDecodeError) as e:
            fail(f"cannot read question file {question_file}: {e}")
        if not question:
            fail(f"question file {question_file} is empty")
    if not question or not question.strip():
        fail("--question flag is required")
    return question


async def run_filter(
    driver: FilterDriver,
    llm_client: BaseLLMClient,
    source: Iterable[str],
    sink: TextIO,
) -> None:
    """Drive the filter over ``source`` and write every output line to ``sink``."""
    async with llm_client:
        async for output_line in driver.run(source):
            sink.write(output_line + "\n")
            sink.flush()


@app.command()
def main(
    question: Optional[str] = typer.Option(
        None, "--question", "-q", help="Question to ask the LLM for each line"
    ),
    question_file: Optional[Path] = typer.Option(
        None, "--question-file", help="Read the question from a file", dir_okay=False
    ),
    model: Optional[str] = typer.Option(
        None, "--model", "-m", help="Ollama model name [default: OLLAMA_MODEL or llama3.1:latest]"
    ),
    ollama_url: Optional[str] = typer.Option(
        None, "--ollama-url", help="Ollama API URL [default: OLLAMA_BASE_URL or http://localhost:11434]"
    ),
    keep_if: KeepPolicy = typer.Option(
        KeepPolicy.YES, "--keep-if", case_sensitive=False,
        help="Keep lines where the answer is 'yes' or 'no'",
    ),
    show_all: bool = typer.Option(
        False, "--show-all", help="Print all lines with +/- keep indicator"
    ),
    input_path: Optional[Path] = typer.Option(
        None, "--input", "-i", help="Input file path (default: stdin)", dir_okay=False
    ),
    output_path: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Output file path (default: stdout)", dir_okay=False
    ),
    concurrency: Optional[int] = typer.Option(
        None, "--concurrency", "-c", help="Classifications in flight; output order is preserved"
    ),
    prompt_template: Optional[Path] = typer.Option(
        None, "--prompt-template", help="Jinja2 prompt template using {{ question }} and {{ content }}",
        dir_okay=False,
    ),
    timeout: Optional[float] = typer.Option(
        None, "--timeout", help="Per-request timeout in seconds"
    ),
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Diagnostics level on stderr"
    ),
):
    """Keep or drop each input line based on the model's yes/no answer."""
    settings = get_settings()
    configure_logging(log_level or settings.LOG_LEVEL, settings.ENVIRONMENT)

    resolved_question = resolve_question(question, question_file)

    try:
        options = FilterOptions(
            question=resolved_question,
            keep_policy=keep_if,
            display_mode=DisplayMode.ANNOTATE if show_all else DisplayMode.FILTER,
            concurrency=concurrency if concurrency is not None else settings.FILTER_CONCURRENCY,
        )
    except ValidationError as e:
        fail("; ".join(f"{'.'.join(map(str, err['loc']))}: {err['msg']}" for err in e.errors()))

    template_path = prompt_template or (
        Path(settings.PROMPT_TEMPLATE_PATH) if settings.PROMPT_TEMPLATE_PATH else None
    )
    try:
        prompt_builder = PromptBuilder(template_path)
    except (OSError, TemplateError) as e:
        fail(f"cannot load prompt template {template_path}: {e}")

    resolved_model = model or settings.OLLAMA_MODEL
    if not resolved_model.strip():
        fail("model name must not be empty (set --model or OLLAMA_MODEL)")
    base_url = ollama_url or settings.OLLAMA_BASE_URL
    if not base_url.strip():
        fail("Ollama URL must not be empty (set --ollama-url or OLLAMA_BASE_URL)")

    llm_client = OllamaClient(
        base_url=base_url,
        timeout=timeout if timeout is not None else settings.OLLAMA_TIMEOUT,
    )
    classifier = Classifier(
        llm_client=llm_client,
        model=resolved_model,
        prompt_builder=prompt_builder,
    )
    driver = FilterDriver(classifier, options)

    logger.info(
        "Starting line filter",
        model=classifier.model,
        base_url=llm_client.base_url,
        keep_if=options.keep_policy.value,
        display_mode=options.display_mode.value,
        concurrency=options.concurrency,
    )

    with ExitStack() as stack:
        try:
            source: Iterable[str] = (
                stack.enter_context(input_path.open("r", encoding="utf-8"))
                if input_path is not None else sys.stdin
            )
        except OSError as e:
            fail(f"opening input file: {e}")
        try:
            sink: TextIO = (
                stack.enter_context(output_path.open("w", encoding="utf-8"))
                if output_path is not None else sys.stdout
            )
        except OSError as e:
            fail(f"creating output file: {e}")

        try:
            asyncio.run(run_filter(driver, llm_client, source, sink))
        except (OSError, UnicodeDecodeError) as e:
            logger.error("I/O error, stopping", error=str(e), error_type=type(e).__name__)
            raise typer.Exit(1)
        except KeyboardInterrupt:
            raise typer.Exit(130)


def run() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    run()
