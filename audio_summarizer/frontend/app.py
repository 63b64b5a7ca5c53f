"""
Gradio upload form for the Audio Summarizer API.

Run with ``python -m audio_summarizer.frontend.app`` while the API is
reachable at BACKEND_BASE_URL.
"""

from typing import Optional

import gradio as gr
from loguru import logger

from ..config import settings, MODE_LABELS, DEFAULT_SUMMARY_MODE
from .api_client import SummarizerClient
from .state import FormState, run_submission
from .views import render_actions, render_error, render_summary

SUBMIT_LABEL = "Generate summary"
LOADING_LABEL = "Processing audio…"
PROGRESS_MESSAGE = "⏳ Processing audio… running transcription and summarization."
SUPPORTED_FORMATS_HINT = "Supported formats: mp3, m4a, wav, mp4, webm, and more. Max size: 25 MB."
MODE_HINT = "Used to slightly adjust how the summary is generated."
PRIVACY_NOTE = "Your file is processed securely and not stored after summarization."


def render(state: FormState):
    """Map a form state onto the component updates, in output order"""
    result = state.result
    return (
        state,
        gr.update(value=render_error(state.error) if state.error else "", visible=bool(state.error)),
        gr.update(value=LOADING_LABEL if state.loading else SUBMIT_LABEL, interactive=not state.loading),
        gr.update(visible=state.loading),
        gr.update(visible=result is not None),
        gr.update(value=render_summary(result) if result else ""),
        gr.update(value=render_actions(result) if result else ""),
        gr.update(visible=result is not None, open=False),
        gr.update(value=result.transcript if result else ""),
    )


def submit_form(state: FormState, file_path: Optional[str], mode: str, client: SummarizerClient):
    """Yield the loading state, then the outcome of sending the file"""
    state = state.with_file(file_path).with_mode(mode)
    if not state.file_path:
        yield render(state.missing_file())
        return

    loading = state.submit_started()
    yield render(loading)
    yield render(run_submission(loading, client))


def build_demo(client: Optional[SummarizerClient] = None) -> gr.Blocks:
    """Build the single-page upload form"""
    client = client or SummarizerClient()

    with gr.Blocks(title="AI Audio & Meeting Summarizer") as demo:
        form_state = gr.State(FormState())

        gr.Markdown("# AI Audio & Meeting Summarizer")
        gr.Markdown(
            "Upload a meeting, podcast, or any other recording and get a clean, structured "
            "summary with key points, action items, and decisions in minutes."
        )

        with gr.Row():
            with gr.Column(scale=3):
                file_input = gr.File(
                    label="Audio or video file",
                    file_types=["audio", "video"],
                    type="filepath"
                )
                gr.Markdown(SUPPORTED_FORMATS_HINT)
            with gr.Column(scale=1):
                mode_input = gr.Dropdown(
                    choices=[(label, value) for value, label in MODE_LABELS.items()],
                    value=DEFAULT_SUMMARY_MODE,
                    label="Audio type"
                )
                gr.Markdown(MODE_HINT)

        error_output = gr.Markdown(visible=False)

        with gr.Row():
            submit_button = gr.Button(SUBMIT_LABEL, variant="primary")
            gr.Markdown(PRIVACY_NOTE)

        progress_output = gr.Markdown(PROGRESS_MESSAGE, visible=False)

        with gr.Row(visible=False) as results_row:
            summary_output = gr.Markdown()
            actions_output = gr.Markdown()

        with gr.Accordion("Show full transcript", open=False, visible=False) as transcript_panel:
            transcript_output = gr.Textbox(show_label=False, lines=12, interactive=False)

        outputs = [
            form_state,
            error_output,
            submit_button,
            progress_output,
            results_row,
            summary_output,
            actions_output,
            transcript_panel,
            transcript_output,
        ]

        def handle_submit(state: FormState, file_path: Optional[str], mode: str):
            yield from submit_form(state, file_path, mode, client)

        submit_button.click(
            fn=handle_submit,
            inputs=[form_state, file_input, mode_input],
            outputs=outputs
        )

    return demo


def main():
    logger.info(f"Connecting to Backend API at: {settings.backend_base_url}")
    demo = build_demo()
    demo.launch(server_name=settings.frontend_host, server_port=settings.frontend_port)


if __name__ == "__main__":
    main()
