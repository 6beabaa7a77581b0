"""Link list API command.

CLI: pagelinker link list <page> [--sort-by FIELD] [--reverse] [--depth N]
"""

from collections.abc import Iterator

from .._output_schemas.link import LinkListOutput
from ..config.PageLinkerConfig import PageLinkerConfig
from ..page.PageLoadError import PageLoadError
from ..site.Site import Site
from ..StageResult import StageResult
from ._describe_links import _describe_links
from .LinkCollection import LinkCollection
from .LinkError import LinkError
from .ResolutionError import ResolutionError


def cmd_list(page: str, sort_by: str = "", reverse: bool = False, depth: int = 0) -> StageResult:
    """List the pages and sub-directories next to a page.

    Args:
        page: Path of the page file
        sort_by: Page field to order by (empty keeps directory order)
        reverse: Reverse the order
        depth: How many sub-directory levels to list
    """

    def _failure(result_obj: StageResult, message: str) -> None:
        result_obj.result = f"Link list failed: {message}"
        result_obj.output = LinkListOutput(
            errors=[message],
            warnings=[],
            page=page,
            base_dir="",
            sort_by=sort_by,
            reverse=reverse,
            entries=[],
            count=0,
        ).model_dump(mode="python")
        result_obj.success = False

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        try:
            config = PageLinkerConfig.load()
        except ValueError as e:
            _failure(result_obj, f"Failed to load config: {e}")
            return

        yield (0.3, "Resolving page...")
        site = Site(config.site)
        try:
            linked_page = site.get_page(page)
        except ValueError as e:
            _failure(result_obj, str(e))
            return
        if not linked_page.path.is_file():
            _failure(result_obj, f"Page file not found: {linked_page.path}")
            return

        yield (0.5, "Building links...")
        links = LinkCollection(linked_page)
        if sort_by:
            links.sort_by(sort_by, reverse)
        try:
            entries = _describe_links(links, depth, sort_by, reverse)
        except LinkError as e:
            _failure(result_obj, str(e))
            return
        except PageLoadError as e:
            _failure(result_obj, str(ResolutionError(e.path, linked_page.uri, e)))
            return

        yield (1.0, "Complete")
        result_obj.result = f"Found {len(entries)} link(s) next to {page}"
        result_obj.output = LinkListOutput(
            errors=[],
            warnings=[],
            page=page,
            base_dir=links.base_dir,
            sort_by=sort_by,
            reverse=reverse,
            entries=entries,
            count=len(entries),
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce=f"Listing links for {page}...",
        progress_callback=do_work,
    )
