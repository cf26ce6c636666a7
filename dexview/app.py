"""Gradio page with the search field and Search / Add / Random / Clear buttons."""

from __future__ import annotations

import argparse
from typing import Callable, Optional, Sequence, Tuple

import gradio as gr

from .errors import InvalidInputError
from .logging_utils import configure_logging, create_logger
from .pipeline import BatchRenderer, parse_search_value, random_ids

logger = create_logger("dexview.app")


class DexViewPage:
    """Event handlers for the page.

    Each browser session keeps its own ``BatchRenderer`` in a ``gr.State``;
    every handler takes that renderer and returns ``(html, renderer)``.
    """

    def __init__(self, renderer_factory: Callable[[], BatchRenderer] = BatchRenderer) -> None:
        self._renderer_factory = renderer_factory

    def _session(self, renderer: Optional[BatchRenderer]) -> BatchRenderer:
        # gr.State starts as None; the first event of a session creates its renderer.
        return renderer if renderer is not None else self._renderer_factory()

    async def _render(
        self, ids: Sequence, renderer: Optional[BatchRenderer] = None
    ) -> Tuple[str, BatchRenderer]:
        renderer = self._session(renderer)
        try:
            await renderer.render_batch(ids)
        except InvalidInputError as exc:
            logger.warning("Rejected batch", error=str(exc))
        return renderer.sink.to_html(), renderer

    async def search(
        self, value: str, renderer: Optional[BatchRenderer] = None
    ) -> Tuple[str, BatchRenderer]:
        """Run a batch for the comma-separated search field."""
        renderer = self._session(renderer)
        ids = parse_search_value(value or "")
        if not ids:
            # Blank field: leave whatever is displayed untouched.
            return renderer.sink.to_html(), renderer
        return await self._render(ids, renderer)

    async def random(self, renderer: Optional[BatchRenderer] = None) -> Tuple[str, BatchRenderer]:
        return await self._render(random_ids(), renderer)

    def clear(self, renderer: Optional[BatchRenderer] = None) -> Tuple[str, BatchRenderer]:
        renderer = self._session(renderer)
        renderer.clear()
        return "", renderer


def build_app(page: Optional[DexViewPage] = None) -> gr.Blocks:
    """Wire the page handlers into a Gradio Blocks layout."""
    page = page or DexViewPage()
    with gr.Blocks(title="DexView") as demo:
        gr.Markdown("# DexView\nSearch Pokemon by name or dex number, separated by commas.")
        session = gr.State(None)
        search_value = gr.Textbox(label="Search", placeholder="pikachu, 25, garchomp", autofocus=True)
        with gr.Row():
            search = gr.Button("Search", variant="primary")
            add = gr.Button("Add")
            random_button = gr.Button("Random")
            clear = gr.Button("Clear")
        output = gr.HTML()

        search.click(page.search, inputs=[search_value, session], outputs=[output, session])
        add.click(page.search, inputs=[search_value, session], outputs=[output, session])
        # Enter in the text field runs the same search.
        search_value.submit(page.search, inputs=[search_value, session], outputs=[output, session])
        random_button.click(page.random, inputs=session, outputs=[output, session])
        clear.click(page.clear, inputs=session, outputs=[output, session])
    return demo


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Run the DexView Gradio page.")
    parser.add_argument("--host", default="127.0.0.1", help="Host for the Gradio server.")
    parser.add_argument("--port", type=int, default=7860, help="Port for the Gradio server.")
    parser.add_argument("--share", action="store_true", help="Share the Gradio app publicly.")
    parser.add_argument("--log-level", default="INFO", help="Logging level (default: INFO).")
    args = parser.parse_args(argv)

    configure_logging(args.log_level)
    demo = build_app()
    demo.queue().launch(server_name=args.host, server_port=args.port, share=args.share)


if __name__ == "__main__":
    main()
