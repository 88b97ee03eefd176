"""Unit tests for the case selection form."""

from __future__ import annotations

import itertools
import random

from gp_portfolio.core.errors import GenerationError
from gp_portfolio.core.generation_client import GENERIC_FAILURE, GenerationClient
from gp_portfolio.core.notifications import NotificationCenter, NotificationKind
from gp_portfolio.core.selection_form import SELECTION_LIMIT_MESSAGE, SUCCESS_MESSAGE, SelectionForm
from gp_portfolio.utils.state import CAPABILITIES, CaseInput, ReviewContent
from gp_portfolio.utils.validators import CAPABILITIES_REQUIRED, DESCRIPTION_REQUIRED


def _review(*capabilities: str) -> ReviewContent:
    return ReviewContent(
        brief_description="brief",
        reflection="reflection",
        learning_needs="needs",
        capabilities={name: f"text for {name}" for name in capabilities},
    )


class RecordingClient(GenerationClient):
    def __init__(self, result=None, error=None):
        self.calls = []
        self.result = result
        self.error = error

    def generate(self, case: CaseInput) -> ReviewContent:
        self.calls.append(case)
        if self.error is not None:
            raise self.error
        return self.result or _review(*case.capabilities)


def _form(client=None):
    notifier = NotificationCenter(ttl=3.0, clock=lambda: 0.0)
    received = []
    form = SelectionForm(client or RecordingClient(), notifier, on_review=received.append)
    return form, notifier, received


class TestToggleCapability:
    def test_appends_in_click_order(self):
        form, _, _ = _form()
        form.toggle_capability(CAPABILITIES[5])
        form.toggle_capability(CAPABILITIES[0])
        assert form.selected == [CAPABILITIES[5], CAPABILITIES[0]]

    def test_toggle_again_removes(self):
        form, _, _ = _form()
        form.toggle_capability("Making a diagnosis")
        assert form.toggle_capability("Making a diagnosis") is True
        assert form.selected == []

    def test_fourth_distinct_capability_is_refused(self):
        form, notifier, _ = _form()
        for name in CAPABILITIES[:3]:
            form.toggle_capability(name)

        assert form.toggle_capability("Community orientation") is False

        assert form.selected == list(CAPABILITIES[:3])
        active = notifier.active()
        assert active is not None
        assert active.kind == NotificationKind.ERROR
        assert active.message == SELECTION_LIMIT_MESSAGE

    def test_removal_is_allowed_when_full(self):
        form, _, _ = _form()
        for name in CAPABILITIES[:3]:
            form.toggle_capability(name)
        assert form.toggle_capability(CAPABILITIES[1]) is True
        assert form.selected == [CAPABILITIES[0], CAPABILITIES[2]]

    def test_unknown_capability_is_refused(self):
        form, notifier, _ = _form()
        assert form.toggle_capability("Juggling") is False
        assert form.selected == []
        assert notifier.active().kind == NotificationKind.ERROR

    def test_random_sequences_never_exceed_three_or_duplicate(self):
        rng = random.Random(1234)
        form, _, _ = _form()
        for name in (rng.choice(CAPABILITIES) for _ in range(500)):
            form.toggle_capability(name)
            assert len(form.selected) <= 3
            assert len(set(form.selected)) == len(form.selected)

    def test_refused_fourth_then_swap_keeps_order(self):
        for first, second, third, fourth in itertools.islice(
            itertools.permutations(CAPABILITIES, 4), 200
        ):
            form, _, _ = _form()
            for name in (first, second, third, fourth, second, fourth):
                form.toggle_capability(name)
            assert form.selected == [first, third, fourth]


class TestSetDescription:
    def test_stores_text_verbatim(self):
        form, _, _ = _form()
        form.set_description("  65yo male, chest pain \n")
        assert form.description == "  65yo male, chest pain \n"


class TestSubmit:
    def test_empty_description_fails_without_request(self):
        client = RecordingClient()
        form, notifier, received = _form(client)
        form.toggle_capability("Making a diagnosis")

        assert form.submit() is None

        assert client.calls == []
        assert received == []
        assert notifier.active().message == DESCRIPTION_REQUIRED

    def test_whitespace_description_counts_as_empty(self):
        client = RecordingClient()
        form, notifier, _ = _form(client)
        form.set_description("   \n ")
        form.toggle_capability("Making a diagnosis")

        form.submit()

        assert client.calls == []
        assert notifier.active().message == DESCRIPTION_REQUIRED

    def test_no_capabilities_fails_without_request(self):
        client = RecordingClient()
        form, notifier, _ = _form(client)
        form.set_description("65yo male, chest pain")

        form.submit()

        assert client.calls == []
        assert notifier.active().message == CAPABILITIES_REQUIRED

    def test_valid_form_sends_exactly_one_request_with_current_state(self):
        for count in (1, 2, 3):
            client = RecordingClient()
            form, _, _ = _form(client)
            form.set_description("65yo male, chest pain")
            for name in CAPABILITIES[:count]:
                form.toggle_capability(name)

            form.submit()

            assert len(client.calls) == 1
            sent = client.calls[0]
            assert sent.description == "65yo male, chest pain"
            assert sent.capabilities == list(CAPABILITIES[:count])

    def test_success_hands_review_over_and_notifies(self):
        form, notifier, received = _form()
        form.set_description("65yo male, chest pain")
        form.toggle_capability("Making a diagnosis")

        review = form.submit()

        assert received == [review]
        assert list(review.capabilities) == ["Making a diagnosis"]
        assert form.generating is False
        active = notifier.active()
        assert active.kind == NotificationKind.SUCCESS
        assert active.message == SUCCESS_MESSAGE

    def test_second_submit_while_generating_is_ignored(self):
        form, _, _ = _form()
        nested_results = []

        class ReentrantClient(RecordingClient):
            def generate(self, case):
                nested_results.append(form.submit())
                return super().generate(case)

        client = ReentrantClient()
        form.client = client
        form.set_description("65yo male, chest pain")
        form.toggle_capability("Making a diagnosis")

        form.submit()

        assert nested_results == [None]
        assert len(client.calls) == 1

    def test_generating_flag_is_set_during_request(self):
        form, _, _ = _form()
        seen = []

        class WatchingClient(RecordingClient):
            def generate(self, case):
                seen.append((form.generating, form.can_submit))
                return super().generate(case)

        form.client = WatchingClient()
        form.set_description("case")
        form.toggle_capability("Clinical management")
        form.submit()

        assert seen == [(True, False)]
        assert form.generating is False
        assert form.can_submit is True

    def test_server_error_message_is_shown_verbatim_and_review_kept(self):
        client = RecordingClient(error=GenerationError("quota exceeded", status_code=500))
        form, notifier, received = _form(client)
        form.set_description("65yo male, chest pain")
        form.toggle_capability("Making a diagnosis")

        assert form.submit() is None

        assert received == []
        assert notifier.active().message == "quota exceeded"
        assert notifier.active().kind == NotificationKind.ERROR
        assert form.generating is False

    def test_form_is_reusable_after_failure(self):
        client = RecordingClient(error=GenerationError(GENERIC_FAILURE))
        form, _, received = _form(client)
        form.set_description("case")
        form.toggle_capability("Clinical management")
        form.submit()

        client.error = None
        form.submit()

        assert len(client.calls) == 2
        assert len(received) == 1

    def test_can_submit_mirrors_form_state(self):
        form, _, _ = _form()
        assert form.can_submit is False
        form.set_description("case")
        assert form.can_submit is False
        form.toggle_capability("Clinical management")
        assert form.can_submit is True

    def test_whitespace_description_cannot_submit(self):
        form, _, _ = _form()
        form.toggle_capability("Clinical management")
        form.set_description(" \n\t ")
        assert form.can_submit is False
