import gradio as gr

from jsonmend.handlers import (
    duplicate_value_handler,
    format_text_handler,
    get_value_handler,
    load_text_file,
    locate_paths_handler,
    repair_text_handler,
    set_value_handler,
    sort_array_handler,
    suggest_paths_handler,
)
from jsonmend.logging_config import configure_logging
from jsonmend.settings import get_settings

# --- UI Definition ---
with gr.Blocks(title="jsonmend") as demo:
    gr.Markdown("# jsonmend")
    gr.Markdown("Repair JSON-like text, validate and format JSON, and find where a path lives in a document.")

    with gr.Row():
        with gr.Column(scale=1):
            gr.Markdown("### Document")
            file_input = gr.File(label="Upload File", file_types=[".json", ".js", ".txt"])
            document = gr.Code(label="JSON", language="json", lines=20, interactive=True)
            status_msg = gr.Textbox(label="Status", interactive=False)

        with gr.Column(scale=1):
            with gr.Tab("Repair"):
                gr.Markdown("Fixes unquoted keys, single quotes, comments, trailing commas, JSONP wrappers and MongoDB types.")
                repair_btn = gr.Button("Repair", variant="primary")

            with gr.Tab("Validate & Format"):
                indent = gr.Number(label="Indentation (0 = compact)", value=2, precision=0)
                sort_keys = gr.Checkbox(label="Sort object keys", value=False)
                escape_unicode = gr.Checkbox(label="Escape non-ASCII characters", value=False)
                format_btn = gr.Button("Validate & Format", variant="primary")

            with gr.Tab("Sort Array"):
                sort_path = gr.Textbox(label="Sort by path", placeholder=".name")
                sort_direction = gr.Radio(choices=["Ascending", "Descending"], value="Ascending", label="Direction")
                sort_btn = gr.Button("Sort", variant="primary")

            with gr.Tab("Locate Paths"):
                paths_input = gr.Textbox(label="Paths (one per line)", lines=6, placeholder=".items[0].name")
                with gr.Row():
                    suggest_btn = gr.Button("Suggest Paths")
                    locate_btn = gr.Button("Locate", variant="primary")
                locations = gr.Dataframe(
                    headers=["Path", "Line", "Column"],
                    datatype=["str", "number", "number"],
                    col_count=(3, "fixed"),
                    interactive=False,
                    label="Locations",
                )

            with gr.Tab("Get / Set Value"):
                value_path = gr.Textbox(label="Path", placeholder=".items[0].name")
                value_output = gr.Code(label="Value", language="json", interactive=False)
                new_value = gr.Textbox(label="New value", placeholder="text, number, true, false or null")
                with gr.Row():
                    get_btn = gr.Button("Get")
                    set_btn = gr.Button("Set", variant="primary")
                    duplicate_btn = gr.Button("Duplicate")

    file_input.upload(
        fn=load_text_file,
        inputs=[file_input],
        outputs=[document, status_msg],
    )

    repair_btn.click(
        fn=repair_text_handler,
        inputs=[document],
        outputs=[document, status_msg],
    )

    format_btn.click(
        fn=format_text_handler,
        inputs=[document, indent, sort_keys, escape_unicode],
        outputs=[document, status_msg],
    )

    sort_btn.click(
        fn=sort_array_handler,
        inputs=[document, sort_path, sort_direction],
        outputs=[document, status_msg],
    )

    suggest_btn.click(
        fn=suggest_paths_handler,
        inputs=[document],
        outputs=[paths_input],
    )

    locate_btn.click(
        fn=locate_paths_handler,
        inputs=[document, paths_input],
        outputs=[locations, status_msg],
    )

    get_btn.click(
        fn=get_value_handler,
        inputs=[document, value_path],
        outputs=[value_output, status_msg],
    )

    set_btn.click(
        fn=set_value_handler,
        inputs=[document, value_path, new_value],
        outputs=[document, status_msg],
    )

    duplicate_btn.click(
        fn=duplicate_value_handler,
        inputs=[document, value_path],
        outputs=[document, value_path, status_msg],
    )

if __name__ == "__main__":
    settings = get_settings()
    configure_logging(settings.log_level)
    demo.launch(server_name=settings.server_name, server_port=settings.server_port)
