"""Streamlit UI entrypoint."""

from __future__ import annotations

import streamlit as st

from gp_portfolio.config import settings
from gp_portfolio.core.notifications import NotificationCenter, NotificationKind
from gp_portfolio.core.orchestrator import Orchestrator
from gp_portfolio.utils.logger import logger
from gp_portfolio.utils.copy_button import copy_button
from gp_portfolio.utils.state import CAPABILITIES, MAX_CAPABILITIES

PAGE_TITLE = settings.app.name
NOTIFICATION_REFRESH_SECONDS = 0.5

HOW_TO_USE = [
    "Enter your case description in detail",
    f"Select 1-{MAX_CAPABILITIES} capabilities",
    "Click 'Generate Case Review'",
    "Edit the generated sections as needed",
    "Copy sections to your portfolio",
]


def init_session_state() -> None:
    if "orchestrator" not in st.session_state:
        st.session_state.orchestrator = Orchestrator()
    if "case_description" not in st.session_state:
        st.session_state.case_description = ""


def _orchestrator() -> Orchestrator:
    return st.session_state.orchestrator


def _capability_key(index: int) -> str:
    return f"capability_{index}"


def _on_capability_toggle(name: str, widget_key: str) -> None:
    form = _orchestrator().form
    if not form.toggle_capability(name):
        # Refused toggles must not leave the checkbox ticked.
        st.session_state[widget_key] = name in form.selected


def _on_section_edit(section_key: str, widget_key: str) -> None:
    _orchestrator().review.edit_field(section_key, st.session_state[widget_key])


def render_form() -> None:
    form = _orchestrator().form

    description = st.text_area(
        "Case Description",
        key="case_description",
        placeholder="Enter your case description...",
        height=200,
    )
    form.set_description(description)

    st.markdown("**Capabilities**")
    columns = st.columns(2)
    for index, name in enumerate(CAPABILITIES):
        widget_key = _capability_key(index)
        with columns[index % 2]:
            st.checkbox(
                name,
                key=widget_key,
                on_change=_on_capability_toggle,
                args=(name, widget_key),
            )
    if form.selected:
        st.caption("Selected: " + ", ".join(form.selected))
    else:
        st.caption(f"Choose up to {MAX_CAPABILITIES}")

    if st.button(
        "Generating..." if form.generating else "Generate Case Review",
        key="generate_review",
        disabled=not form.can_submit,
        use_container_width=True,
    ):
        with st.spinner("Generating..."):
            _orchestrator().generate()
        st.rerun()


def render_how_to_use() -> None:
    st.subheader("How to use")
    st.markdown("\n".join(f"{number}. {step}" for number, step in enumerate(HOW_TO_USE, start=1)))


def render_review() -> None:
    review = _orchestrator().review
    if not review.has_content:
        return

    st.divider()
    st.header("Case Review")
    revision = review.revision
    for section_key, label, text in review.sections():
        widget_key = f"review_{revision}_{section_key}"
        st.text_area(
            label,
            value=text,
            key=widget_key,
            height=160,
            on_change=_on_section_edit,
            args=(section_key, widget_key),
        )
        result = copy_button(text, key=f"copy_{revision}_{section_key}")
        if result is not None:
            review.report_copy(section_key, None if result.ok else result.error)
            st.rerun()

    st.divider()
    markdown = review.to_markdown()
    col1, col2 = st.columns(2)
    with col1:
        st.download_button(
            "Download Markdown",
            data=markdown,
            file_name="case_review.md",
            mime="text/markdown",
            use_container_width=True,
            key="download_markdown",
        )
    with col2:
        # PDF is rebuilt only when the review text changes.
        cache_id = (revision, hash(markdown))
        if st.session_state.get("pdf_data_cache_id") != cache_id:
            st.session_state.pdf_data_cache = review.to_pdf()
            st.session_state.pdf_data_cache_id = cache_id
        st.download_button(
            "Download PDF",
            data=st.session_state.pdf_data_cache,
            file_name="case_review.pdf",
            mime="application/pdf",
            use_container_width=True,
            key="download_pdf",
        )


def render_notification(notifier: NotificationCenter) -> None:
    """Show the single active notification; nothing once it has expired."""
    notification = notifier.active()
    if notification is None:
        return
    if notifier.pop_unseen() is not None:
        logger.debug("Showing {} notification: {}", notification.kind.value, notification.message)
    text = f"**{notification.title}** {notification.message}"
    if notification.kind == NotificationKind.SUCCESS:
        st.success(text, icon="✅")
    else:
        st.error(text, icon="⚠️")


def notification_refresh_interval(notifier: NotificationCenter) -> float | None:
    # Keep re-rendering the slot while something is shown so it clears on expiry.
    return NOTIFICATION_REFRESH_SECONDS if notifier.active() is not None else None


def _notification_slot() -> None:
    render_notification(_orchestrator().notifier)


def main() -> None:
    st.set_page_config(page_title=PAGE_TITLE, layout="wide")
    init_session_state()

    st.title(f"{PAGE_TITLE} 🏥")

    notifier = _orchestrator().notifier
    st.fragment(_notification_slot, run_every=notification_refresh_interval(notifier))()

    col1, col2 = st.columns([2, 1])
    with col1:
        with st.container(border=True):
            render_form()
    with col2:
        with st.container(border=True):
            render_how_to_use()

    render_review()


if __name__ == "__main__":
    main()
