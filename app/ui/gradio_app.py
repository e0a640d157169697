import gradio as gr

from app.config import GitHubConfig, load_config
from app.github.github_client import GitHubClient
from app.state.coordinator import RequestCoordinator
from app.ui.render import (
    SHOW_README,
    loading_text,
    readme_text,
    repository_cards,
    suggestion_items,
    toggle_label,
)


def render(session: RequestCoordinator, picked: str | None = None):
    """
    Maps the session onto the page outputs, in the order
    [status, suggestions, repo_cards, repo_picker, readme_toggle, readme_box].
    """
    state = session.state
    suggestions = suggestion_items(session)
    repo_names = [r.name for r in state.repositories]
    show_repos = bool(repo_names) and not suggestions
    picked = state.expanded_repo or (picked if picked in repo_names else None)

    return (
        gr.update(value=loading_text(session)),
        gr.update(value=suggestions, visible=bool(suggestions)),
        gr.update(value=repository_cards(session)),
        gr.update(choices=repo_names, value=picked, visible=show_repos),
        gr.update(value=toggle_label(session, picked), visible=show_repos),
        gr.update(value=readme_text(state.readme), visible=state.readme is not None),
    )


def search_users(text, session):
    ticket = session.submit_text(text)
    if ticket is None:
        yield render(session)
        return
    yield render(session)
    session.run(ticket)
    yield render(session)


def select_user(evt: gr.SelectData, session):
    suggestions = session.state.suggested_accounts
    if evt.index is None or evt.index >= len(suggestions):
        yield render(session)
        return
    ticket = session.select_account(suggestions[evt.index].handle)
    yield render(session)
    session.run(ticket)
    yield render(session)


def toggle_readme(repo_name, session):
    ticket = session.toggle_readme(repo_name)
    yield render(session, repo_name)
    if ticket is None:
        return
    session.run(ticket)
    yield render(session, repo_name)


def build_ui(config: GitHubConfig):
    client = GitHubClient(config)

    with gr.Blocks(css="""
    .loading-text { font-style: italic; opacity: 0.8; }
    #readme-box textarea { font-family: monospace; }
""", title="GitHub Project Viewer") as demo:

        gr.Markdown("## GitHub Project Viewer")

        # --- Session ---
        session = gr.State(lambda: RequestCoordinator(client))

        # --- Search bar ---
        with gr.Row():
            query_input = gr.Textbox(
                show_label=False,
                placeholder="Enter GitHub username",
                scale=8
            )
            search_button = gr.Button("Search", variant="primary", scale=1)

        status = gr.Markdown(elem_classes=["loading-text"])

        # --- Content ---
        suggestions = gr.Gallery(
            label="Users",
            columns=6,
            allow_preview=False,
            visible=False
        )
        repo_cards = gr.Markdown()
        with gr.Row():
            repo_picker = gr.Radio(label="Repository", choices=[], visible=False, scale=8)
            readme_toggle = gr.Button(SHOW_README, visible=False, scale=1)
        readme_box = gr.Textbox(
            label="README",
            lines=20,
            interactive=False,
            visible=False,
            elem_id="readme-box"
        )

        outputs = [status, suggestions, repo_cards, repo_picker, readme_toggle, readme_box]

        # --- Events ---
        query_input.submit(search_users, inputs=[query_input, session], outputs=outputs, api_name=False)
        search_button.click(search_users, inputs=[query_input, session], outputs=outputs, api_name=False)
        suggestions.select(select_user, inputs=[session], outputs=outputs, api_name=False)
        readme_toggle.click(toggle_readme, inputs=[repo_picker, session], outputs=outputs, api_name=False)
        repo_picker.change(
            lambda name, s: gr.update(value=toggle_label(s, name)),
            inputs=[repo_picker, session],
            outputs=[readme_toggle]
        )

    return demo


def launch_ui(config: GitHubConfig | None = None):
    demo = build_ui(config or load_config())
    demo.launch(show_api=False)
