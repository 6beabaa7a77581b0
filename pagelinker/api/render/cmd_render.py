"""Render API command.

CLI: pagelinker page render <page>
"""

from collections.abc import Iterator

from jinja2 import TemplateError

from .._output_schemas.render import RenderRenderOutput
from ..config.PageLinkerConfig import PageLinkerConfig
from ..link.LinkError import LinkError
from ..page.PageLoadError import PageLoadError
from ..site.Site import Site
from ..StageResult import StageResult
from .render_page import render_page


def cmd_render(page: str) -> StageResult:
    """Render a page with its template variables.

    Args:
        page: Path of the page file
    """

    def _failure(result_obj: StageResult, message: str, uri: str = "") -> None:
        result_obj.result = f"Render failed: {message}"
        result_obj.output = RenderRenderOutput(
            errors=[message],
            warnings=[],
            page=page,
            uri=uri,
            text="",
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
            rendered_page = site.get_page(page)
        except ValueError as e:
            _failure(result_obj, str(e))
            return

        yield (0.5, "Rendering...")
        try:
            text = render_page(rendered_page)
        except (LinkError, PageLoadError, TemplateError) as e:
            _failure(result_obj, str(e), rendered_page.uri)
            return

        yield (1.0, "Complete")
        result_obj.result = f"Rendered {page}"
        result_obj.output = RenderRenderOutput(
            errors=[],
            warnings=[],
            page=page,
            uri=rendered_page.uri,
            text=text,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce=f"Rendering {page}...",
        progress_callback=do_work,
    )
