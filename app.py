import logging

import gradio as gr

from jformatter.config import load_config
from jformatter.editor import line_numbers
from jformatter.handlers import convert_handler, source_changed_handler
from jformatter.registry import list_formats

config = load_config()
logging.basicConfig(
    level=config.log_level_value,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# --- UI Definition ---
with gr.Blocks(title="jFormatter") as demo:
    gr.Markdown("# jFormatter")
    gr.Markdown("Paste JSON, XML or YAML, pick the format and convert it to a pretty-printed form.")

    with gr.Row():
        # Left Panel: Source
        with gr.Column(scale=1):
            with gr.Row():
                gutter = gr.Textbox(
                    value=line_numbers(""),
                    label="Line",
                    lines=20,
                    max_lines=20,
                    interactive=False,
                    scale=0,
                    min_width=60,
                )
                source_text = gr.Textbox(
                    label="Source",
                    lines=20,
                    max_lines=20,
                    placeholder="Paste text to format",
                    scale=1,
                )
            error_view = gr.HighlightedText(
                label="Error location",
                color_map={"error": "red"},
                combine_adjacent=True,
                show_legend=False,
                visible=False,
            )

        # Middle: Controls
        with gr.Column(scale=0, min_width=140):
            format_selector = gr.Dropdown(
                choices=list_formats(),
                value=config.default_format,
                label="Format",
                interactive=True,
            )
            convert_btn = gr.Button("Convert", variant="primary")

        # Right Panel: Destination
        with gr.Column(scale=1):
            destination_text = gr.Textbox(
                label="Formatted",
                lines=20,
                max_lines=20,
            )

    source_text.change(
        fn=source_changed_handler,
        inputs=[source_text],
        outputs=[gutter, error_view],
    )

    convert_btn.click(
        fn=convert_handler,
        inputs=[source_text, format_selector],
        outputs=[destination_text, error_view],
        concurrency_limit=1,
    )

if __name__ == "__main__":
    demo.launch(server_name=config.server_name, server_port=config.server_port)
