# SitemapLens — CLI (Typer)
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import json
from typing import Callable, List, Optional, Union

import typer
from rich import print
from rich.console import Console
from rich.markup import escape

from .config import Settings
from .core.extractor import LinkExtractor
from .core.models import LinkEntry, LinkReport, SitemapReference
from .errors import InvalidUrlError, SitemapLensError
from .logging_config import configure_logging
from .utils.io import write_json

app = typer.Typer(add_completion=False, no_args_is_help=True)
err_console = Console(stderr=True)

Operation = Callable[[LinkExtractor, str], List[Union[LinkEntry, SitemapReference]]]


def _settings(
	user_agent: Optional[str],
	timeout: Optional[float],
	max_depth: Optional[int],
	log_level: Optional[str],
) -> Settings:
	cfg = Settings()
	overrides = {
		"user_agent": user_agent,
		"timeout": timeout,
		"max_sitemap_depth": max_depth,
		"log_level": log_level,
	}
	return cfg.model_copy(update={k: v for k, v in overrides.items() if v is not None})


def _run(url: str, operation: Operation, cfg: Settings, output: Optional[str]) -> None:
	configure_logging(level=cfg.log_level, log_dir=cfg.log_dir)
	try:
		with LinkExtractor(cfg) as extractor:
			items = operation(extractor, url)
	except InvalidUrlError as e:
		err_console.print(f"[bold red]Invalid URL:[/bold red] {escape(e.message)}")
		raise typer.Exit(code=2)
	except SitemapLensError as e:
		err_console.print(f"[bold red]Error:[/bold red] {escape(e.message)}")
		raise typer.Exit(code=1)
	report = LinkReport.build(url, items).to_dict()
	if output:
		write_json(output, report)
		print(f"[bold]Wrote {report['totalCount']} items to[/bold] {escape(output)}")
	else:
		typer.echo(json.dumps(report, indent=2, ensure_ascii=False))


url_arg = typer.Argument(..., help="Target URL")
user_agent_opt = typer.Option(None, help="Override User-Agent")
timeout_opt = typer.Option(None, help="Per-request timeout (seconds)")
max_depth_opt = typer.Option(None, help="Maximum sitemap index nesting")
log_level_opt = typer.Option(None, help="Log level")
output_opt = typer.Option(None, help="Write the JSON report to this file")


@app.command("find-sitemaps")
def find_sitemaps(
	url: str = url_arg,
	user_agent: Optional[str] = user_agent_opt,
	timeout: Optional[float] = timeout_opt,
	log_level: Optional[str] = log_level_opt,
	output: Optional[str] = output_opt,
):
	"""Find all sitemap paths for a website."""
	cfg = _settings(user_agent, timeout, None, log_level)
	_run(url, LinkExtractor.find_all_sitemaps, cfg, output)


@app.command("sitemap-links")
def sitemap_links(
	url: str = url_arg,
	user_agent: Optional[str] = user_agent_opt,
	timeout: Optional[float] = timeout_opt,
	max_depth: Optional[int] = max_depth_opt,
	log_level: Optional[str] = log_level_opt,
	output: Optional[str] = output_opt,
):
	"""Extract links from a specific sitemap URL."""
	cfg = _settings(user_agent, timeout, max_depth, log_level)
	_run(url, LinkExtractor.extract_links_from_sitemap, cfg, output)


@app.command("website-links")
def website_links(
	url: str = url_arg,
	user_agent: Optional[str] = user_agent_opt,
	timeout: Optional[float] = timeout_opt,
	max_depth: Optional[int] = max_depth_opt,
	log_level: Optional[str] = log_level_opt,
	output: Optional[str] = output_opt,
):
	"""Extract all links from a website using available sitemaps, else its homepage."""
	cfg = _settings(user_agent, timeout, max_depth, log_level)
	_run(url, LinkExtractor.extract_all_links, cfg, output)


@app.command("page-links")
def page_links(
	url: str = url_arg,
	user_agent: Optional[str] = user_agent_opt,
	timeout: Optional[float] = timeout_opt,
	log_level: Optional[str] = log_level_opt,
	output: Optional[str] = output_opt,
):
	"""Extract the hyperlinks of a single page."""
	cfg = _settings(user_agent, timeout, None, log_level)
	_run(url, LinkExtractor.extract_links_from_page, cfg, output)


@app.command("print-config")
def print_config():
	"""Print effective configuration from environment."""
	cfg = Settings()
	print(cfg.model_dump())


def main():
	app()


if __name__ == "__main__":
	main()
