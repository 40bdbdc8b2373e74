"""Link scan API command."""

from collections.abc import Iterator
from pathlib import Path

from ..config.HtmlLinksConfig import HtmlLinksConfig
from ..document.TextDocument import TextDocument
from ..StageResult import StageResult
from .find_document_links import find_document_links
from .LinkScanOutput import LinkScanOutput


def cmd_scan(path: str, base: str | None = None) -> StageResult:
    """Find the links of an HTML file.

    Args:
        path: HTML file to scan
        base: URI to resolve relative links against; defaults to the file's URI
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        file_path = Path(path).expanduser()

        def fail(message: str) -> None:
            result_obj.output = LinkScanOutput(
                path=str(file_path), base_uri="", links=[], errors=[message]
            ).model_dump(mode="python")
            result_obj.result = message
            result_obj.success = False

        yield (0.1, "Loading configuration...")
        try:
            config = HtmlLinksConfig.load()
        except ValueError as e:
            fail(str(e))
            return

        yield (0.3, "Reading document...")
        if not file_path.is_file():
            fail(f"File not found: {path}")
            return
        try:
            document = TextDocument.from_path(file_path)
        except (OSError, UnicodeDecodeError) as e:
            fail(f"Cannot read file: {e}")
            return
        if base:
            document = TextDocument(uri=base, text=document.text, language_id=document.language_id)

        yield (0.6, "Scanning for links...")
        links = find_document_links(document, config=config.links)

        unresolved = sum(1 for link in links if link.target is None)
        result_obj.output = LinkScanOutput(
            path=str(file_path),
            base_uri=document.uri,
            links=[link.to_dict() for link in links],
            errors=[],
        ).model_dump(mode="python")
        summary = f"Found {len(links)} links in {file_path.name}"
        if unresolved:
            summary += f" ({unresolved} without target)"
        result_obj.result = summary
        result_obj.success = True

    return StageResult(announce=f"Scanning links in {path}...", progress_callback=do_work)
