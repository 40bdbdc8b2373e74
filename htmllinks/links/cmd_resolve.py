"""Link resolve API command."""

from collections.abc import Iterator

from ..config.HtmlLinksConfig import HtmlLinksConfig
from ..StageResult import StageResult
from .DocumentContext import UriDocumentContext
from .LinkResolution import ResolutionStatus
from .LinkResolveOutput import LinkResolveOutput
from .resolve_link_target import resolve_link_target


def cmd_resolve(reference: str, base: str) -> StageResult:
    """Resolve a single link reference against a base URI."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Loading configuration...")
        try:
            config = HtmlLinksConfig.load()
        except ValueError as e:
            result_obj.output = LinkResolveOutput(
                base_uri=base, reference=reference, status="error", target=None, errors=[str(e)]
            ).model_dump(mode="python")
            result_obj.result = str(e)
            result_obj.success = False
            return

        yield (0.6, "Resolving reference...")
        resolution = resolve_link_target(base, reference, UriDocumentContext(), config.links)
        errors = [resolution.reason] if resolution.status is ResolutionStatus.INVALID else []
        result_obj.output = LinkResolveOutput(
            base_uri=base,
            reference=reference,
            status=resolution.status.value,
            target=resolution.target,
            errors=errors,
        ).model_dump(mode="python")

        if resolution.status is ResolutionStatus.RESOLVED:
            result_obj.result = f"Resolved to {resolution.target}"
        elif resolution.status is ResolutionStatus.FILTERED:
            result_obj.result = f"Not a link: {resolution.reason}"
        else:
            result_obj.result = f"Invalid reference: {resolution.reason}"
        result_obj.success = True

    return StageResult(announce=f"Resolving {reference!r} against {base}...", progress_callback=do_work)
