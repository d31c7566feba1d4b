"""Main CLI entry point for Post Insight."""

import asyncio
import logging
import sys

import hydra
from omegaconf import DictConfig
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .models import ExtractionResult
from .pipeline import PostAnalyzer
from .source import DocumentSource, get_document_source

console = Console()


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
        force=True,
    )


def build_source(cfg: DictConfig) -> DocumentSource:
    kwargs = {
        "timeout": cfg.fetch.timeout,
        "user_agent": cfg.fetch.user_agent,
        "accept_language": cfg.fetch.accept_language,
    }
    if cfg.fetch.transport == "browser":
        kwargs["headless"] = cfg.fetch.headless
    return get_document_source(cfg.fetch.transport, **kwargs)


@hydra.main(version_base=None, config_path="../../conf", config_name="config")
def main(cfg: DictConfig) -> None:
    """Main entry point."""
    setup_logging(cfg.logging.level)

    if not cfg.url:
        console.print("[red]No URL given.[/red] Usage: post-insight url=https://www.instagram.com/p/...")
        sys.exit(2)

    if cfg.output.format != "json":
        console.print("[bold blue]Post Insight[/bold blue]")
        console.print(f"[cyan]URL:[/cyan] {cfg.url}")
        console.print(f"[cyan]Transport:[/cyan] {cfg.fetch.transport}")
        console.print()

    analyzer = PostAnalyzer(source=build_source(cfg))
    with console.status("분석 중..."):
        result = asyncio.run(analyzer.analyze(cfg.url))

    if cfg.output.format == "json":
        console.print_json(result.to_json())
    else:
        show_result(result)

    if cfg.output.strict and not result.success:
        sys.exit(1)


def show_result(result: ExtractionResult) -> None:
    """Display an analysis result."""
    if not result.success:
        console.print(f"[red]{result.error}[/red] [dim]({result.error_kind.value})[/dim]")
        return

    table = Table(title="인스타그램 게시물 분석")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("유형", "릴스" if result.is_reel else "게시물")
    table.add_row("작성자", result.author or "-")
    table.add_row("업로드 시간 (KST)", result.upload_time)
    table.add_row("좋아요", result.likes or "-")
    table.add_row("댓글", result.comments or "-")
    table.add_row("조회수", result.views or "-")
    table.add_row("이미지", result.image_url or "-")

    console.print(table)

    if result.caption:
        console.print()
        console.print("[bold]캡션 미리보기[/bold]")
        console.print(result.caption, markup=False)


if __name__ == "__main__":
    main()
